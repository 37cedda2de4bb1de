import pytest


def test_string_change(node):
    node.add_change('name', 'Report.pdf')
    assert node.get_pending_document() == {'name': 'Report.pdf'}


def test_overwriting_change(node):
    node.add_change('name', 'a')
    node.add_change('name', 'b')
    assert node.get_pending_document() == {'name': 'b'}


def test_multiple_fields(node):
    node.add_change('name', 'Report.pdf')
    node.add_change('description', 'Quarterly')
    assert node.get_pending_document() == {'name': 'Report.pdf', 'description': 'Quarterly'}


@pytest.mark.parametrize('value', [
    pytest.param(True, id='true'),
    pytest.param(False, id='false'),
    pytest.param(0, id='zero'),
    pytest.param(123, id='int'),
    pytest.param(1.5, id='float'),
    pytest.param('', id='empty-str'),
    pytest.param(None, id='null'),
    pytest.param(['a', 'b'], id='list'),
    pytest.param({'access': 'open'}, id='dict'),
])
def test_values_are_composed_as_is(node, value):
    node.add_change('field', value)
    document = node.get_pending_document()
    assert document == {'field': value}


def test_falsy_values_still_count_as_changes(node):
    node.add_change('can_non_owners_invite', False)
    assert node.has_pending_changes
    assert node.get_pending_document() == {'can_non_owners_invite': False}


def test_null_value_is_a_change_and_is_sent_as_null(node):
    node.add_change('shared_link', None)
    assert node.has_pending_changes
    assert node.get_pending_changes() == '{"shared_link":null}'


def test_key_order_is_the_order_of_first_changes(node):
    node.add_change('b', 1)
    node.add_change('a', 2)
    node.add_change('b', 3)
    assert list(node.get_pending_document()) == ['b', 'a']


def test_scalar_change_does_not_call_the_parser(node, parser):
    node.add_change('name', 'Report.pdf')
    assert not parser.called
