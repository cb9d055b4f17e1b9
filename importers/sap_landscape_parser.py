# app/importers/sap_landscape_parser.py
# -*- coding: utf-8 -*-
from __future__ import annotations
"""
SAP GUI Landscape-parser (SAPUILandscape.xml)

Gjør en Landscape-eksport om til en ordnet liste av prosjekter med
SAP-systemer:

  XML -> generisk tre -> tabeller (routere, services, noder) -> join -> output

Regler som ikke skal glemmes:
- uuid-er sammenlignes alltid etter strip() (eksportene padder ulikt).
- Service av type "Reference" er en snarvei; Item-et som peker dit hoppes
  over, det ekte systemet nås via sitt eget Item.
- routerid som ikke finnes i router-tabellen sendes videre rått.
- Instansnummer = port - 3200 for port i [3200, 3300), ellers tomt.
- Memo på Item går foran Memo på Service.
- Noder uten systemer tas ikke med.
- parse() kaster aldri; ved feil logges det og [] returneres.

Host/port splittes på FØRSTE kolon. IPv6-adresser støttes ikke.
"""
from typing import Any, Dict, List, Optional, Tuple, Union
import logging
import re

from .sap_landscape_models import (
    Item,
    ParsedProject,
    Router,
    SapSystem,
    Service,
    WorkspaceNode,
)
from .sap_landscape_xml import as_list, attr, decode_xml, extract_text

__all__ = [
    "SapLandscapeParser",
    "parse_sap_config",
    "split_server",
    "instance_from_port",
    "resolve_router",
    "REFERENCE_TYPE",
]

logger = logging.getLogger(__name__)

REFERENCE_TYPE = "Reference"
INSTANCE_PORT_BASE = 3200
INSTANCE_PORT_LIMIT = 3300
UNKNOWN_SYSTEM_NAME = "Unknown"
UNNAMED_PROJECT_NAME = "Unnamed Project"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# ---------------- Hjelpere ----------------

def split_server(server: str) -> Tuple[str, str]:
    """``"host:port"`` -> ``("host", "port")``. Manglende port gir ``""``."""
    parts = (server or "").split(":")
    host = parts[0]
    port = parts[1] if len(parts) > 1 else ""
    return host, port


def instance_from_port(port: str) -> Optional[str]:
    if not port:
        return None
    m = _LEADING_INT.match(port)
    if not m:
        return None
    n = int(m.group(1))
    if INSTANCE_PORT_BASE <= n < INSTANCE_PORT_LIMIT:
        return f"{n - INSTANCE_PORT_BASE:02d}"
    return None


def resolve_router(router_id: str, routers: Dict[str, str]) -> Optional[str]:
    rid = (router_id or "").strip()
    if not rid:
        return None
    if rid in routers:
        return routers[rid]
    logger.debug("Router %s finnes ikke i Routers – sender rå uuid videre", rid)
    return rid


# ---------------- Tabeller ----------------

def _build_routers(landscape: Dict[str, Any]) -> Dict[str, str]:
    routers: Dict[str, str] = {}
    section = landscape.get("Routers")
    if not isinstance(section, dict):
        return routers
    for raw in as_list(section.get("Router")):
        uuid = attr(raw, "uuid").strip()
        value = attr(raw, "router")
        if uuid and value:
            r = Router(uuid=uuid, router_string=value)
            routers[r.uuid] = r.router_string
    return routers


def _build_services(section: Dict[str, Any]) -> Dict[str, Service]:
    services: Dict[str, Service] = {}
    for raw in as_list(section.get("Service")):
        uuid = attr(raw, "uuid").strip()
        if not uuid:
            continue
        services[uuid] = Service(
            uuid=uuid,
            type=attr(raw, "type"),
            name=attr(raw, "name"),
            system_id=attr(raw, "systemid"),
            server=attr(raw, "server"),
            router_id=attr(raw, "routerid"),
            memo=raw.get("Memo"),
        )
    return services


def _build_nodes(section: Dict[str, Any]) -> List[WorkspaceNode]:
    nodes: List[WorkspaceNode] = []
    for ws in as_list(section.get("Workspace")):
        if not isinstance(ws, dict) or not ws.get("Node"):
            logger.debug("Workspace uten Node – hopper over")
            continue
        for raw in as_list(ws.get("Node")):
            if not isinstance(raw, dict):
                continue
            items = [
                Item(service_id=attr(it, "serviceid"), memo=it.get("Memo"))
                for it in as_list(raw.get("Item"))
                if isinstance(it, dict)
            ]
            nodes.append(WorkspaceNode(
                name=attr(raw, "name") or UNNAMED_PROJECT_NAME,
                memo=raw.get("Memo"),
                items=items,
            ))
    return nodes


# ---------------- Parser ----------------

class SapLandscapeParser:
    """Best-effort uttrekk: tom liste ved total feil, aldri exception."""

    def parse(self, xml: Union[str, bytes]) -> List[ParsedProject]:
        try:
            return self._parse(xml)
        except Exception:
            logger.exception("Klarte ikke å parse SAP Landscape XML")
            return []

    def _parse(self, xml: Union[str, bytes]) -> List[ParsedProject]:
        doc = decode_xml(xml)
        landscape = doc.get("Landscape")
        if not isinstance(landscape, dict):
            logger.warning("Fant ikke <Landscape> i SAP XML")
            return []

        routers = _build_routers(landscape)
        logger.debug("Fant %d routere", len(routers))

        services_section = landscape.get("Services")
        if not isinstance(services_section, dict) or not services_section.get("Service"):
            logger.warning("Fant ikke <Services> i SAP XML")
            return []
        services = _build_services(services_section)
        logger.debug("Fant %d services", len(services))

        workspaces = landscape.get("Workspaces")
        if not isinstance(workspaces, dict) or not workspaces.get("Workspace"):
            logger.warning("Fant ikke <Workspaces> i SAP XML")
            return []

        projects: List[ParsedProject] = []
        for node in _build_nodes(workspaces):
            systems = [s for s in (self._system(it, services, routers) for it in node.items) if s]
            if not systems:
                continue
            projects.append(ParsedProject(
                name=node.name,
                systems=systems,
                memo=extract_text(node.memo) or None,
            ))

        logger.info(
            "Parset %d prosjekter med totalt %d systemer",
            len(projects), sum(len(p.systems) for p in projects),
        )
        return projects

    def _system(self, item: Item, services: Dict[str, Service],
                routers: Dict[str, str]) -> Optional[SapSystem]:
        sid = item.service_id.strip()
        if not sid:
            return None
        service = services.get(sid)
        if service is None:
            logger.debug("Service %s finnes ikke – hopper over Item", sid)
            return None
        if service.type == REFERENCE_TYPE:
            logger.debug("Hopper over Reference-snarvei: %s", service.name)
            return None

        host, port = split_server(service.server)
        memo = extract_text(item.memo) or extract_text(service.memo)
        return SapSystem(
            uuid=service.uuid,
            name=service.name or UNKNOWN_SYSTEM_NAME,
            system_id=service.system_id,
            server_host=host,
            router_string=resolve_router(service.router_id, routers),
            instance_number=instance_from_port(port),
            memo=memo or None,
        )


def parse_sap_config(xml: Union[str, bytes]) -> List[ParsedProject]:
    return SapLandscapeParser().parse(xml)
