import pytest

from pattern_model import (
    DegenerateInputError,
    connected_blocks,
    connected_components,
    generate_partitions,
    joint_variables,
    parse_pattern,
    partition_joint_variables,
)

from conftest import MAN, SODA, UGLY


def test_three_clauses_give_four_nontrivial_partitions():
    parts = generate_partitions((MAN, SODA, UGLY))
    assert parts == [
        ((MAN,), (SODA, UGLY)),
        ((MAN, SODA), (UGLY,)),
        ((SODA,), (MAN, UGLY)),
        ((MAN,), (SODA,), (UGLY,)),
    ]


def test_partitions_are_disjoint_and_cover_pattern():
    pattern = parse_pattern("p(?x), q(?x, ?y), r(?y), s(?z)")
    parts = generate_partitions(pattern)
    assert len(parts) == 14  # Bell(4) - 1
    for partition in parts:
        flat = [c for block in partition for c in block]
        assert sorted(map(str, flat)) == sorted(map(str, pattern))
        assert len(partition) >= 2


def test_single_clause_has_no_partitions():
    assert generate_partitions((MAN,)) == []


def test_empty_pattern_is_degenerate():
    with pytest.raises(DegenerateInputError):
        generate_partitions(())


def test_connected_only_filters_disconnected_blocks():
    pattern = parse_pattern("p(?x), q(?x, ?y), r(?z)")
    parts = generate_partitions(pattern, connected_only=True)
    for partition in parts:
        for block in partition:
            assert len(connected_components(block)) == 1
    assert ((pattern[1],), (pattern[0], pattern[2])) not in parts
    assert ((pattern[0],), (pattern[1], pattern[2])) not in parts
    assert ((pattern[0],), (pattern[1],), (pattern[2],)) in parts


def test_connected_components():
    pattern = parse_pattern("p(?x), r(?z), q(?x, ?y), s(?y), t(c)")
    comps = connected_components(pattern)
    assert comps == [
        (pattern[0], pattern[2], pattern[3]),
        (pattern[1],),
        (pattern[4],),
    ]


def test_joint_variables():
    pattern = parse_pattern("p(?x, ?y), q(?x), r(?y, ?z), s(?z)")
    partition = ((pattern[0], pattern[1]), (pattern[2],), (pattern[3],))
    assert joint_variables(partition, partition[0]) == ("?y",)
    assert joint_variables(partition, partition[1]) == ("?y", "?z")
    assert joint_variables(partition, partition[2]) == ("?z",)
    assert partition_joint_variables(partition) == ("?y", "?z")


def test_connected_blocks_keep_partition_order():
    partition = ((SODA,), (MAN, UGLY))
    assert connected_blocks(partition, "?x") == [(SODA,), (MAN, UGLY)]
    assert connected_blocks(partition, "?nope") == []
