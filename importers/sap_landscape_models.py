# app/importers/sap_landscape_models.py
# -*- coding: utf-8 -*-
"""
Datatyper for SAP Landscape-import.

Mellomformatet (Router/Service/Item/WorkspaceNode) bygges i ett
normaliseringspass over det generiske treet. Output (SapSystem,
ParsedProject) er det kalleren gjør om til prosjekter og credentials.
Alt lever kun innenfor ett parse-kall.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

__all__ = ["Router", "Service", "Item", "WorkspaceNode", "SapSystem", "ParsedProject"]


@dataclass
class Router:
    uuid: str
    router_string: str


@dataclass
class Service:
    uuid: str
    type: str = ""
    name: str = ""
    system_id: str = ""
    server: str = ""
    router_id: str = ""
    # rå Memo-node fra dekodingen, tekst hentes først ved emisjon
    memo: Any = None


@dataclass
class Item:
    service_id: str
    memo: Any = None


@dataclass
class WorkspaceNode:
    name: str
    memo: Any = None
    items: List[Item] = field(default_factory=list)


@dataclass
class SapSystem:
    """Ett SAP-system, klart til å bli én credential.

    Attributes
    ----------
    uuid
        Service-uuid fra landscape-fila.
    server_host
        Vertsdelen av ``server`` (tekst før første ``:``).
    router_string
        Oppslått SAP router-streng, eller rå routerid hvis den ikke finnes.
    instance_number
        To-sifret instansnummer avledet fra port 32NN.
    """

    uuid: str
    name: str
    system_id: str = ""
    server_host: str = ""
    router_string: Optional[str] = None
    instance_number: Optional[str] = None
    memo: Optional[str] = None


@dataclass
class ParsedProject:
    name: str
    systems: List[SapSystem] = field(default_factory=list)
    memo: Optional[str] = None
