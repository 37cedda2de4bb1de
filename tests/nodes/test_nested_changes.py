import pytest

from lazypatch.structs.nodes import ChangeTrackingNode


def test_nested_change_of_a_populated_child(node, child):
    child.add_change('id', '123')
    node.add_nested_change('parent', child)
    assert node.get_pending_document() == {'parent': {'id': '123'}}


def test_nested_change_reflects_child_changes_after_registration(node, child):
    node.add_nested_change('parent', child)
    child.add_change('id', '123')
    assert node.get_pending_document() == {'parent': {'id': '123'}}


def test_nested_change_reflects_child_overwrites_after_composition(node, child):
    node.add_nested_change('parent', child)
    child.add_change('id', '123')
    assert node.get_pending_document() == {'parent': {'id': '123'}}
    child.add_change('id', '456')
    assert node.get_pending_document() == {'parent': {'id': '456'}}


def test_nested_change_of_a_clean_child_is_an_empty_object(node, child):
    node.add_nested_change('parent', child)
    assert node.get_pending_document() == {'parent': {}}
    assert node.get_pending_changes() == '{"parent":{}}'


def test_nested_change_of_a_cleared_child_is_an_empty_object(node, child):
    child.add_change('id', '123')
    node.add_nested_change('parent', child)
    child.clear_pending_changes()
    assert node.get_pending_document() == {'parent': {}}


def test_only_nested_changes_make_the_document(node, child):
    node.add_nested_change('parent', child)
    assert node.has_pending_changes
    assert node.get_pending_document() is not None


def test_nested_and_scalar_changes_together(node, child):
    node.add_change('name', 'Report.pdf')
    node.add_nested_change('parent', child)
    child.add_change('id', '123')
    assert node.get_pending_document() == {'name': 'Report.pdf', 'parent': {'id': '123'}}


def test_deep_nesting():
    root = ChangeTrackingNode()
    middle = ChangeTrackingNode()
    leaf = ChangeTrackingNode()
    root.add_nested_change('a', middle)
    middle.add_nested_change('b', leaf)
    leaf.add_change('c', 'value')
    assert root.get_pending_document() == {'a': {'b': {'c': 'value'}}}


def test_deep_nesting_with_clean_leaf():
    root = ChangeTrackingNode()
    middle = ChangeTrackingNode()
    leaf = ChangeTrackingNode()
    root.add_nested_change('a', middle)
    middle.add_nested_change('b', leaf)
    assert root.get_pending_document() == {'a': {'b': {}}}


def test_shared_child_is_reflected_in_all_parents(child):
    parent1 = ChangeTrackingNode()
    parent2 = ChangeTrackingNode()
    parent1.add_nested_change('parent', child)
    parent2.add_nested_change('folder', child)
    child.add_change('id', '123')
    assert parent1.get_pending_document() == {'parent': {'id': '123'}}
    assert parent2.get_pending_document() == {'folder': {'id': '123'}}


def test_same_child_under_two_keys(node, child):
    node.add_nested_change('a', child)
    node.add_nested_change('b', child)
    child.add_change('id', '123')
    assert node.get_pending_document() == {'a': {'id': '123'}, 'b': {'id': '123'}}


def test_nested_change_replaces_previous_child(node):
    child1 = ChangeTrackingNode()
    child2 = ChangeTrackingNode()
    child1.add_change('id', '1')
    child2.add_change('id', '2')
    node.add_nested_change('parent', child1)
    node.add_nested_change('parent', child2)
    assert node.get_pending_document() == {'parent': {'id': '2'}}

    # The replaced child is not tracked anymore.
    child1.add_change('id', '111')
    assert node.get_pending_document() == {'parent': {'id': '2'}}


def test_nested_change_replaces_scalar_change(node, child):
    node.add_change('parent', {'id': '1'})
    node.add_nested_change('parent', child)
    child.add_change('id', '2')
    assert node.get_pending_document() == {'parent': {'id': '2'}}


def test_scalar_change_replaces_nested_change(node, child):
    node.add_nested_change('parent', child)
    node.add_change('parent', {'id': '1'})
    child.add_change('id', '2')
    assert node.get_pending_document() == {'parent': {'id': '1'}}


def test_add_change_with_a_node_is_a_nested_change(node, child):
    node.add_change('parent', child)
    child.add_change('id', '123')
    assert node.get_pending_document() == {'parent': {'id': '123'}}


@pytest.mark.parametrize('value', [None, {'id': '123'}, '123'])
def test_nested_change_with_a_non_node_fails(node, value):
    with pytest.raises(TypeError, match=r"A nested change must be a ChangeTrackingNode"):
        node.add_nested_change('parent', value)
    assert node.get_pending_document() is None


def test_composition_does_not_modify_the_child(node, child):
    child.add_change('id', '123')
    node.add_nested_change('parent', child)
    node.get_pending_document()
    assert child.get_pending_document() == {'id': '123'}
