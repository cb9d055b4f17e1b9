# -*- coding: utf-8 -*-
"""Init-modul for importers-pakken.

Eksponerer høy-nivå funksjoner slik at de kan importeres direkte fra
`importers`-pakken:

    from importers import parse_sap_config, build_import_plan
"""

from __future__ import annotations

from .sap_landscape_parser import parse_sap_config, SapLandscapeParser
from .sap_landscape_import import build_import_plan, execute_import_plan

__all__ = ["parse_sap_config", "SapLandscapeParser", "build_import_plan", "execute_import_plan"]
