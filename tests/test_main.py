import logging
import shutil

import pytest

import plotting
from main import build_demo_family, setup_logging
from models import Address, MaritalState
from tree import ANCESTOR_NAME, build_family_tree, get_root_parents
from validation import validate_registry


@pytest.fixture
def demo():
    return build_demo_family()


def by_name(manager, first_name):
    return next(p for p in manager if p.first_name == first_name)


def test_demo_family_shape(demo):
    assert len(demo) == 8
    assert validate_registry(demo) == []
    david = by_name(demo, "David")
    assert david.marital_status.state is MaritalState.DIVORCED
    assert [c.first_name for c in demo.children_of(david.id)] == ["Michael", "Sarah", "Olivia"]


def test_demo_family_tree(demo):
    root = build_family_tree(demo)
    assert root.value.first_name == ANCESTOR_NAME
    assert [n.value.first_name for n in root.children] == ["John", "Jane", "Emily"]


def test_demo_root_parents(demo):
    roots = get_root_parents(demo, by_name(demo, "Sarah"))
    assert [p.first_name for p in roots] == ["Emily", "Jane", "John"]


def test_demo_uses_given_addresses():
    home = Address("1 Rue de la Paix", "Paris", "IDF", "France", "75002")
    manager = build_demo_family([home])
    assert by_name(manager, "John").address == home
    assert by_name(manager, "Emily").address.street == "456 Elm St"


def test_describe_tree(demo):
    lines = plotting.describe_tree(demo).splitlines()
    assert lines[0] == ANCESTOR_NAME
    assert "  John Doe (1990-01-01)" in lines
    assert "    David Doe (1995-07-10)" in lines


def test_describe_empty_tree(manager):
    assert plotting.describe_tree(manager) == ""


def test_setup_logging(tmp_path):
    log_file = tmp_path / "application.log"
    setup_logging(log_file)
    logging.getLogger("registry").info("hello")
    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    for handler in file_handlers:
        handler.flush()
    try:
        assert "::INFO::hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in file_handlers:
            root.removeHandler(handler)
            handler.close()


@pytest.mark.skipif(shutil.which("dot") is None, reason="Graphviz not installed")
def test_show_tree(demo, monkeypatch):
    shown = []
    monkeypatch.setattr(plotting.plt, "show", lambda: shown.append(True))
    plotting.show_tree(demo, figsize=(4, 3))
    assert shown == [True]
