import pytest

from pushswap.stack import Node, Operation, StackPair, parse_operation


def make_pair(values):
    return StackPair(Node(value, rank) for rank, value in enumerate(values))


VALUES = [5, 8, 1, 9, 3]


@pytest.mark.parametrize(
    "name",
    ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"],
)
def test_parse_operation_round_trip(name):
    assert str(parse_operation(name)) == name


@pytest.mark.parametrize("text", ["", "sa\n", "SA", "rrrr", "s a", "p"])
def test_parse_operation_rejects_unknown(text):
    with pytest.raises(ValueError):
        parse_operation(text)


def test_initial_state():
    pair = make_pair(VALUES)
    assert pair.a_values() == VALUES
    assert pair.b_values() == []
    assert pair.history == []


def test_swap_a_exchanges_top_two():
    pair = make_pair(VALUES)
    pair.apply(Operation.SA)
    assert pair.a_values() == [VALUES[1], VALUES[0], *VALUES[2:]]


def test_rotate_a_moves_top_to_bottom():
    pair = make_pair(VALUES)
    pair.apply("ra")
    assert pair.a_values() == [*VALUES[1:], VALUES[0]]


def test_reverse_a_moves_bottom_to_top():
    pair = make_pair(VALUES)
    pair.apply("rra")
    assert pair.a_values() == [VALUES[-1], *VALUES[:-1]]


def test_push_b_then_push_a_restores():
    pair = make_pair(VALUES)
    pair.apply("pb")
    pair.apply("pb")
    assert pair.b_values() == [VALUES[1], VALUES[0]]
    assert pair.a_values() == VALUES[2:]
    pair.apply("pa")
    pair.apply("pa")
    assert pair.a_values() == VALUES
    assert pair.b_values() == []


@pytest.mark.parametrize(
    "first, second",
    [("sa", "sa"), ("ra", "rra"), ("rra", "ra"), ("ss", "ss"), ("rr", "rrr")],
)
def test_inverse_pairs_restore_state(first, second):
    pair = make_pair(VALUES)
    pair.apply("pb")
    pair.apply("pb")
    pair.apply("pb")
    a_before, b_before = pair.a_values(), pair.b_values()
    pair.apply(first)
    pair.apply(second)
    assert pair.a_values() == a_before
    assert pair.b_values() == b_before


def test_full_rotation_is_identity():
    pair = make_pair(VALUES)
    for _ in VALUES:
        pair.apply(Operation.RA)
    assert pair.a_values() == VALUES


def test_combined_operations_match_separate_ones():
    combined = make_pair(VALUES)
    separate = make_pair(VALUES)
    for pair in (combined, separate):
        pair.apply("pb")
        pair.apply("pb")
        pair.apply("pb")
    combined.apply("rr")
    separate.apply("ra")
    separate.apply("rb")
    assert combined.a_values() == separate.a_values()
    assert combined.b_values() == separate.b_values()


def test_operations_on_short_stacks_do_nothing():
    pair = make_pair([7])
    for name in ["sa", "ra", "rra", "sb", "rb", "rrb", "pa"]:
        pair.apply(name)
    assert pair.a_values() == [7]
    assert pair.b_values() == []


def test_push_from_empty_stack_does_nothing():
    pair = make_pair([])
    pair.apply("pb")
    pair.apply("pa")
    assert pair.a_values() == []
    assert pair.b_values() == []


def test_nodes_keep_their_index():
    pair = make_pair(VALUES)
    pair.apply("pb")
    assert pair.b[0] == Node(VALUES[0], 0)
    assert [node.index for node in pair.a] == [1, 2, 3, 4]


def test_history_records_operations_in_order():
    pair = make_pair(VALUES)
    pair.apply("pb")
    pair.apply(Operation.RA)
    pair.apply("rrr")
    assert pair.history == [Operation.PB, Operation.RA, Operation.RRR]


def test_apply_rejects_unknown_name():
    pair = make_pair(VALUES)
    with pytest.raises(ValueError):
        pair.apply("xx")
    assert pair.a_values() == VALUES
    assert pair.history == []


def test_values_are_conserved_across_operations():
    pair = make_pair(VALUES)
    for name in ["pb", "pb", "ra", "sb", "rrr", "pb", "ss", "rr", "pa"]:
        pair.apply(name)
        assert sorted(pair.a_values() + pair.b_values()) == sorted(VALUES)