# app/importers/sap_landscape_import.py
# -*- coding: utf-8 -*-
"""
Fra parset landscape til opprett-operasjoner.

Hvert prosjekt blir én CreateProject, hvert system én CreateCredential
(fanen APP). Miljø gjettes fra systemnavnet. Selve lagringen (lokal cache,
sync, kryptering) ligger utenfor – ``execute_import_plan`` får to
callables fra kalleren og kjører planen sekvensielt.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Callable, Dict, List, Literal, Optional, Sequence, Union
import logging

from .sap_landscape_models import ParsedProject, SapSystem

__all__ = [
    "Environment",
    "CreateProject",
    "CreateCredential",
    "ImportSummary",
    "infer_environment",
    "build_note_content",
    "build_import_plan",
    "execute_import_plan",
    "plan_to_dicts",
]

logger = logging.getLogger(__name__)

Environment = Literal["DEV", "QAS", "PRD", "NONE"]

PRD_MARKERS = ("PROD", "PRD")
QAS_MARKERS = ("QAS", "QA", "QUALITY")
APP_TAB = "APP"


@dataclass
class CreateProject:
    name: str


@dataclass
class CreateCredential:
    project_name: str
    environment: Environment
    title: str
    tab_category: str = APP_TAB
    username: str = ""
    password: str = ""
    note_content: str = ""
    host_address: str = ""
    instance_number: Optional[str] = None
    saprouter_string: Optional[str] = None


Operation = Union[CreateProject, CreateCredential]


@dataclass
class ImportSummary:
    projects_created: int = 0
    credentials_created: int = 0
    errors: List[str] = field(default_factory=list)


def infer_environment(name: str) -> Environment:
    up = (name or "").upper()
    if any(m in up for m in PRD_MARKERS):
        return "PRD"
    if any(m in up for m in QAS_MARKERS):
        return "QAS"
    return "DEV"


def build_note_content(project: ParsedProject, system: SapSystem) -> str:
    note = f"SID: {system.system_id}\n\n"
    if project.memo:
        note += f"Project Note:\n{project.memo}\n\n"
    return note + (system.memo or "")


def build_import_plan(projects: Sequence[ParsedProject]) -> List[Operation]:
    """Flat plan i dokumentrekkefølge: prosjekt, så dets credentials."""
    plan: List[Operation] = []
    for p in projects:
        plan.append(CreateProject(name=p.name))
        for s in p.systems:
            plan.append(CreateCredential(
                project_name=p.name,
                environment=infer_environment(s.name),
                title=s.name,
                note_content=build_note_content(p, s),
                host_address=s.server_host,
                instance_number=s.instance_number,
                saprouter_string=s.router_string,
            ))
    return plan


def plan_to_dicts(plan: Sequence[Operation]) -> List[Dict[str, object]]:
    out: List[Dict[str, object]] = []
    for op in plan:
        kind = "create_project" if isinstance(op, CreateProject) else "create_credential"
        out.append({"op": kind, **asdict(op)})
    return out


def execute_import_plan(
    plan: Sequence[Operation],
    add_project: Callable[[CreateProject], Optional[str]],
    add_credential: Callable[[str, CreateCredential], object],
) -> ImportSummary:
    """Kjører planen mot lagringslaget.

    ``add_project`` returnerer prosjekt-id. Feiler den (exception eller
    tom id) hoppes prosjektets credentials over. En feilende credential
    logges og importen fortsetter.
    """
    summary = ImportSummary()
    current_id: Optional[str] = None
    for op in plan:
        if isinstance(op, CreateProject):
            current_id = None
            try:
                current_id = add_project(op)
            except Exception as e:
                logger.error("Kunne ikke opprette prosjekt %s: %s", op.name, e)
                summary.errors.append(f"project {op.name}: {e}")
                continue
            if not current_id:
                logger.error("add_project returnerte ingen id for %s", op.name)
                summary.errors.append(f"project {op.name}: no id returned")
                continue
            summary.projects_created += 1
            continue

        if current_id is None:
            continue
        try:
            add_credential(current_id, op)
            summary.credentials_created += 1
        except Exception as e:
            logger.error("Kunne ikke opprette credential %s: %s", op.title, e)
            summary.errors.append(f"credential {op.title}: {e}")

    logger.info(
        "Import ferdig: %d prosjekter, %d credentials, %d feil",
        summary.projects_created, summary.credentials_created, len(summary.errors),
    )
    return summary
