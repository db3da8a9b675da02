"""Graphviz and JSON export of the person registry."""

import json
import logging
import subprocess
from dataclasses import asdict
from pathlib import Path

import pydot

from errors import ExportError, GraphvizError, MissingExtensionError, UnsupportedExtensionError
from models import Gender, MaritalState, Person

logger = logging.getLogger(__name__)

OUTPUT_DIR = Path("output")
DOT_FILENAME = "tree.dot"
JSON_FILENAME = "tree.json"
GRAPH_FORMATS = ("dot", "png", "jpg", "pdf", "svg")
DOCUMENT_FORMATS = ("json",)
GRAPHVIZ_PROGRAM = "dot"

GENDER_COLOR = {Gender.MALE: "blue", Gender.FEMALE: "red"}

# (shape, color) of the node joining a couple
STATUS_STYLE = {
    MaritalState.MARRIED: ("diamond", "green"),
    MaritalState.DIVORCED: ("ellipse", "magenta"),
    MaritalState.WIDOWED: ("triangle", "purple"),
}


# Characters with a meaning inside a record label
RECORD_SPECIAL = "\\{}|<>"


def escape_record(text: str) -> str:
    """Backslash-escape `text` for use as one field of a `shape=record` label."""
    return "".join(f"\\{char}" if char in RECORD_SPECIAL else char for char in text)


def node_id(person_id: int) -> str:
    return f"ID_{person_id}"


def couple_id(id_a: int, id_b: int) -> str:
    """Name of the node shared by two partners; the larger id always comes second."""
    small, large = sorted((id_a, id_b))
    return f"ID_{small}_{large}"


def extension_of(path: Path) -> str:
    """Return the lowercase extension of `path` if it is a supported output format."""
    suffix = Path(path).suffix
    if not suffix:
        raise MissingExtensionError(path)
    extension = suffix[1:].lower()
    if extension not in GRAPH_FORMATS + DOCUMENT_FORMATS:
        raise UnsupportedExtensionError(extension)
    return extension


# ============================================================================
# Graphviz
# ============================================================================


def person_statements(manager, person: Person) -> list:
    """
    DOT statements describing one person and the links they take part in.

    - A record node with identity, status and children ids
    - For a Married/Divorced/Widowed person: the couple node and one edge from
      each partner to it
    - One edge per child, from the couple node when the child's other parent is the
      current partner, otherwise straight from the person

    Both partners emit the same couple node and edges; callers deduplicate.
    """
    children = manager.children_of(person.id)
    status = person.marital_status

    label = (
        f"ID_{person.id}\\n{escape_record(person.last_name)}\\n{escape_record(person.first_name)}"
        f"\\n{escape_record(person.birthday)}"
        f"|{{Status: {status}|Children: {[child.id for child in children]}}}"
    )
    statements: list = [
        pydot.Node(
            node_id(person.id),
            shape="record",
            nojustify="true",
            color=GENDER_COLOR[person.gender],
            label=label,
        )
    ]

    partner_id = status.partner_id
    if partner_id is not None:
        shape, color = STATUS_STYLE[status.state]
        couple = couple_id(person.id, partner_id)
        statements.append(pydot.Node(couple, shape=shape, color=color, label=""))
        for spouse_id in sorted((person.id, partner_id)):
            statements.append(pydot.Edge(node_id(spouse_id), couple))

    for child in children:
        other_parent = child.father_id if child.mother_id == person.id else child.mother_id
        if partner_id is not None and other_parent == partner_id:
            source = couple_id(person.id, partner_id)
        else:
            source = node_id(person.id)
        statements.append(pydot.Edge(source, node_id(child.id)))

    return statements


def build_dot(manager) -> pydot.Dot:
    """Collect every person's statements into one digraph, dropping repeated statements."""
    P = pydot.Dot("family_tree", graph_type="digraph")

    unique: dict[str, object] = {}
    for person in manager:
        for statement in person_statements(manager, person):
            unique.setdefault(statement.to_string(), statement)

    for statement in unique.values():
        if isinstance(statement, pydot.Edge):
            P.add_edge(statement)
        else:
            P.add_node(statement)
    return P


def to_dot(manager) -> str:
    return build_dot(manager).to_string()


def render(dot_file: Path, output_file: Path, fmt: str) -> None:
    """Convert a DOT file with the Graphviz command line tool."""
    args = [GRAPHVIZ_PROGRAM, f"-T{fmt}", str(dot_file), "-o", str(output_file)]
    logger.debug(f"Running {' '.join(args)}")
    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise GraphvizError(f'"{GRAPHVIZ_PROGRAM}" not found in path.') from e
    if result.returncode != 0:
        raise GraphvizError(result.stderr)


def to_graphviz(manager, output_file: Path | None = None, output_dir: Path = OUTPUT_DIR) -> Path:
    """
    Write the registry as a Graphviz digraph and optionally convert it.

    The DOT text always goes to `<output_dir>/tree.dot`. When `output_file` names
    another file, it receives a copy (.dot) or a rendering (.png, .jpg, .pdf, .svg).

    Returns:
        The path of the requested output file.

    Raises:
        MissingExtensionError, UnsupportedExtensionError: For a bad `output_file`.
        ExportError: If the files cannot be written.
        GraphvizError: If the conversion fails.
    """
    output_dir = Path(output_dir)
    dot_file = output_dir / DOT_FILENAME
    output_file = Path(output_file) if output_file else dot_file
    extension = extension_of(output_file)
    if extension not in GRAPH_FORMATS:
        raise UnsupportedExtensionError(extension)

    dot_text = to_dot(manager)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        dot_file.write_text(dot_text, encoding="utf-8")
        if output_file != dot_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            if extension == "dot":
                output_file.write_text(dot_text, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Cannot write graph to {output_file}: {e}") from e

    if output_file != dot_file and extension != "dot":
        render(dot_file, output_file, extension)

    logger.info(f"Graph saved to {output_file}")
    return output_file


def to_png(manager, output_file: Path | None = None, output_dir: Path = OUTPUT_DIR) -> Path:
    return to_graphviz(manager, output_file or Path(output_dir) / "tree.png", output_dir)


def to_jpg(manager, output_file: Path | None = None, output_dir: Path = OUTPUT_DIR) -> Path:
    return to_graphviz(manager, output_file or Path(output_dir) / "tree.jpg", output_dir)


def to_pdf(manager, output_file: Path | None = None, output_dir: Path = OUTPUT_DIR) -> Path:
    return to_graphviz(manager, output_file or Path(output_dir) / "tree.pdf", output_dir)


def to_svg(manager, output_file: Path | None = None, output_dir: Path = OUTPUT_DIR) -> Path:
    return to_graphviz(manager, output_file or Path(output_dir) / "tree.svg", output_dir)


# ============================================================================
# JSON
# ============================================================================


def _status_record(person: Person):
    status = person.marital_status
    if status.partner_id is None:
        return status.state.value
    return {status.state.value: status.partner_id}


def _parent_record(manager, parent_id: int | None, lineage: frozenset[int]):
    if parent_id is None:
        return None
    parent = manager.lookup(parent_id)
    # An ancestor already being serialized further down this line is only referenced.
    if parent is None or parent_id in lineage:
        return {"id": parent_id}
    return person_record(manager, parent, lineage)


def person_record(manager, person: Person, lineage: frozenset[int] = frozenset()) -> dict:
    """Serialize a person with their resolved mother and father, recursively."""
    lineage = lineage | {person.id}
    return {
        "info": {
            "id": person.id,
            "first_name": person.first_name,
            "last_name": person.last_name,
            "birthday": person.birthday,
            "gender": person.gender.name.capitalize(),
        },
        "address": asdict(person.address),
        "marital_status": _status_record(person),
        "mother": _parent_record(manager, person.mother_id, lineage),
        "father": _parent_record(manager, person.father_id, lineage),
        "children": [child.id for child in manager.children_of(person.id)],
    }


def document(manager) -> dict:
    return {f"Person_{person.id}": person_record(manager, person) for person in manager}


def to_json(manager, output_file: Path | None = None, output_dir: Path = OUTPUT_DIR) -> Path:
    """
    Write every person as a `"Person_<id>": {...}` entry of one JSON object.

    Ids are 128-bit integers and are written as plain JSON numbers. Readers that
    parse numbers as 64-bit floats lose digits above 2**53; the `Person_<id>` key
    always carries the exact id as text.

    Raises:
        MissingExtensionError, UnsupportedExtensionError: Unless the file ends in .json.
        ExportError: If the file cannot be written.
    """
    output_file = Path(output_file) if output_file else Path(output_dir) / JSON_FILENAME
    extension = extension_of(output_file)
    if extension not in DOCUMENT_FORMATS:
        raise UnsupportedExtensionError(extension)

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(document(manager), f, indent=2)
    except OSError as e:
        raise ExportError(f"Cannot write document to {output_file}: {e}") from e

    logger.info(f"Document saved to {output_file}")
    return output_file
