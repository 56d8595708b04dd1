import pytest

from runsort import config
from runsort.linked import LinkedList, Node


@pytest.fixture
def clean_settings(monkeypatch):
    """Start from the defaults, with no environment switch or override."""
    monkeypatch.delenv(config.ENV_CHECK_CONTRACTS, raising=False)
    monkeypatch.setattr(config, "_override", None)


@pytest.fixture
def cyclic_list():
    """Build a list of ``size`` nodes whose last node links back to ``loop_to``."""

    def _build(size, loop_to):
        nodes = [Node(i) for i in range(size)]
        for node, nxt in zip(nodes, nodes[1:]):
            node.next = nxt
        nodes[-1].next = nodes[loop_to]
        return LinkedList(head=nodes[0])

    return _build
