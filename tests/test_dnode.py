import pytest

from edakit.dnode import DNode


def make_nodes(count=5):
    return [DNode(idx) for idx in range(count)]


def test_created_node_holds_its_item():
    node = DNode(3)
    assert node.item == 3
    assert not node.is_dummy()


def test_created_node_is_unlinked():
    node = DNode(1)
    assert node.next is None
    assert node.prev is None


def test_dummy_node_has_no_item():
    node = DNode.dummy()
    assert node.is_dummy()
    with pytest.raises(ValueError):
        _ = node.item


def test_link_node_next():
    nodes = make_nodes()
    nodes[0].next = nodes[1]
    assert nodes[0].next.item == 1
    assert nodes[0].next is nodes[1]


def test_link_node_prev():
    nodes = make_nodes()
    nodes[2].prev = nodes[1]
    assert nodes[2].prev.item == 1


def test_chain_of_nodes_walks_both_ways():
    nodes = make_nodes()
    for left, right in zip(nodes, nodes[1:]):
        left.next = right
        right.prev = left
    walked = []
    node = nodes[0]
    while node is not None:
        walked.append(node.item)
        node = node.next
    assert walked == [0, 1, 2, 3, 4]
    back = []
    node = nodes[-1]
    while node is not None:
        back.append(node.item)
        node = node.prev
    assert back == [4, 3, 2, 1, 0]


def test_set_node_item():
    nodes = make_nodes()
    nodes[3].item = 10
    assert nodes[3].item == 10


def test_setting_item_on_dummy_makes_it_a_data_node():
    node = DNode.dummy()
    node.item = 7
    assert not node.is_dummy()
    assert node.item == 7


def test_none_is_a_valid_item():
    node = DNode(None)
    assert not node.is_dummy()
    assert node.item is None