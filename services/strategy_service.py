# services/strategy_service.py
"""Project-scoped strategy diagrams: blocks (nodes) and edges (directed arcs).

Like the items service, functions take the current lists and return new
ones. Operations that touch both blocks and edges return a (blocks, edges)
pair so the caller applies them together.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from core.constants import BLOCK_TYPES, COMPANIES, COPY_SUFFIX, DEFAULT_BLOCK_TYPE, PROJECT_TYPES
from core.models import new_id
from core.time_utils import utc_now_iso

logger = logging.getLogger(__name__)

Block = Dict[str, Any]
Edge = Dict[str, Any]
Project = Dict[str, Any]
Position = Dict[str, float]

GRID_COLUMNS = 4
DUPLICATE_OFFSET = 30


class UnknownBlockError(LookupError):
    pass


# ---- projects ---------------------------------------------------------------

def add_project(projects: List[Project], title: str, project_type: str, company: str) -> List[Project]:
    title = (title or "").strip()
    if not title:
        return projects
    if company not in COMPANIES:
        raise ValueError(f"unknown company: {company}")
    project = {
        "id": new_id(),
        "title": title,
        "type": project_type if project_type in PROJECT_TYPES else PROJECT_TYPES[0],
        "createdAt": utc_now_iso(),
        "company": company,
    }
    return [project] + list(projects)


def company_projects(projects: List[Project], company: str) -> List[Project]:
    return sorted((p for p in projects if p.get("company") == company),
                  key=lambda p: str(p.get("createdAt") or ""))


def delete_project(projects: List[Project], blocks: List[Block], edges: List[Edge],
                   project_id: str) -> Tuple[List[Project], List[Block], List[Edge]]:
    return (
        [p for p in projects if p.get("id") != project_id],
        [b for b in blocks if b.get("projectId") != project_id],
        [e for e in edges if e.get("projectId") != project_id],
    )


# ---- blocks -----------------------------------------------------------------

def project_blocks(blocks: List[Block], project_id: str) -> List[Block]:
    return sorted((b for b in blocks if b.get("projectId") == project_id),
                  key=lambda b: b.get("order") or 0)


def project_edges(edges: List[Edge], project_id: str) -> List[Edge]:
    return [e for e in edges if e.get("projectId") == project_id]


def grid_position(n: int) -> Position:
    """Default placement for the n-th block of a project, wrapping every 4."""
    return {"x": 80 + (n % GRID_COLUMNS) * 220, "y": 80 + (n // GRID_COLUMNS) * 160}


def node_position(block: Block, index: int) -> Position:
    """Where to draw a block; stored position wins, else a 3-wide grid."""
    pos = block.get("position")
    if isinstance(pos, dict) and "x" in pos and "y" in pos:
        return {"x": float(pos["x"]), "y": float(pos["y"])}
    return {"x": 60 + (index % 3) * 240, "y": 60 + (index // 3) * 160}


def add_block(blocks: List[Block], project_id: str, title: str, description: str = "",
              block_type: str = DEFAULT_BLOCK_TYPE, position: Optional[Position] = None) -> List[Block]:
    title = (title or "").strip()
    if not title:
        return blocks
    order = len(project_blocks(blocks, project_id)) + 1
    block = {
        "id": new_id(),
        "title": title,
        "description": (description or "").strip() or "Sem descrição",
        "type": block_type if block_type in BLOCK_TYPES else DEFAULT_BLOCK_TYPE,
        "order": order,
        "projectId": project_id,
        "position": dict(position) if position else grid_position(order),
    }
    return [block] + list(blocks)


def edit_block(blocks: List[Block], block_id: str, title: str, description: str) -> List[Block]:
    """Blank fields keep their current value."""
    out = []
    for b in blocks:
        if b.get("id") == block_id:
            b = dict(b, title=(title or "").strip() or b.get("title"),
                     description=(description or "").strip() or b.get("description"))
        out.append(b)
    return out


def duplicate_block(blocks: List[Block], block_id: str) -> List[Block]:
    """Copy a block (not its edges) with a fresh id, marked title and offset position."""
    source = next((b for b in blocks if b.get("id") == block_id), None)
    if source is None:
        return blocks
    copy = dict(source, id=new_id(), title=f"{source.get('title', '')}{COPY_SUFFIX}")
    pos = source.get("position")
    if isinstance(pos, dict):
        copy["position"] = {"x": pos.get("x", 0) + DUPLICATE_OFFSET, "y": pos.get("y", 0) + DUPLICATE_OFFSET}
    else:
        copy.pop("position", None)
    return [copy] + list(blocks)


def move_block(blocks: List[Block], block_id: str, x: float, y: float) -> List[Block]:
    return [dict(b, position={"x": x, "y": y}) if b.get("id") == block_id else b for b in blocks]


def delete_block(blocks: List[Block], edges: List[Edge], block_id: str) -> Tuple[List[Block], List[Edge]]:
    return (
        [b for b in blocks if b.get("id") != block_id],
        [e for e in edges if e.get("source") != block_id and e.get("target") != block_id],
    )


# ---- edges ------------------------------------------------------------------

def connect(blocks: List[Block], edges: List[Edge], project_id: str,
            source: str, target: str) -> List[Edge]:
    """New directed edge. Self-loops and parallel edges are allowed."""
    known = {b.get("id") for b in blocks}
    for block_id in (source, target):
        if not block_id or block_id not in known:
            raise UnknownBlockError(block_id)
    edge = {"id": new_id(), "source": source, "target": target, "projectId": project_id}
    return list(edges) + [edge]


def delete_edge(edges: List[Edge], edge_id: str) -> List[Edge]:
    return [e for e in edges if e.get("id") != edge_id]


# ---- templates --------------------------------------------------------------

FUNNEL_TEMPLATE = [
    ("Atrair", "Anúncios + Conteúdo", "ads", (0, 0)),
    ("Capturar", "Landing Page", "lp", (240, 0)),
    ("Nutrir", "Sequência de e-mails", "email", (480, 0)),
    ("Converter", "Checkout + Oferta", "checkout", (720, 0)),
]
FUNNEL_LINKS = [(0, 1), (1, 2), (2, 3)]

STRUCTURE_TEMPLATE = [
    ("Vendas", "Processo comercial", "vendas", (0, 0)),
    ("Operacional", "Entrega & execução", "operacional", (0, 180)),
    ("Financeiro", "Fluxo de caixa", "financeiro", (260, 0)),
    ("Estratégico", "OKRs e metas", "estrategico", (260, 180)),
]
STRUCTURE_LINKS = [(0, 2), (1, 3)]

TEMPLATE_ORIGIN = (80, 80)


def _instantiate(blocks, edges, project_id, nodes, links):
    base_x, base_y = TEMPLATE_ORIGIN
    new_blocks = [
        {
            "id": new_id(),
            "title": title,
            "description": description,
            "type": block_type,
            "order": i + 1,
            "projectId": project_id,
            "position": {"x": base_x + dx, "y": base_y + dy},
        }
        for i, (title, description, block_type, (dx, dy)) in enumerate(nodes)
    ]
    new_edges = [
        {"id": new_id(), "source": new_blocks[a]["id"], "target": new_blocks[b]["id"], "projectId": project_id}
        for a, b in links
    ]
    logger.debug("Template with %d blocks added to project %s", len(new_blocks), project_id)
    return new_blocks + list(blocks), new_edges + list(edges)


def add_funnel_template(blocks: List[Block], edges: List[Edge], project_id: str) -> Tuple[List[Block], List[Edge]]:
    return _instantiate(blocks, edges, project_id, FUNNEL_TEMPLATE, FUNNEL_LINKS)


def add_structure_template(blocks: List[Block], edges: List[Edge], project_id: str) -> Tuple[List[Block], List[Edge]]:
    return _instantiate(blocks, edges, project_id, STRUCTURE_TEMPLATE, STRUCTURE_LINKS)
