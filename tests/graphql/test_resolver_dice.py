"""
Tests for dice and greeting GraphQL resolvers
"""

import pytest

from dicegraph.dice import InvalidArgument
from dicegraph.graphql.resolvers.dice import (
    get_dice_roller,
    resolve_die,
    resolve_die_roll,
    resolve_die_roll_once,
    resolve_hello,
    resolve_quote_of_the_day,
    resolve_random,
    resolve_roll_dice,
    resolve_roll_three_dice,
)
from dicegraph.graphql.types.die import RandomDie


def test_roller_comes_from_context(mock_info, dice_roller):
    assert get_dice_roller(mock_info) is dice_roller


def test_resolve_hello(mock_info):
    assert resolve_hello(mock_info) == "Hello world!"


def test_resolve_quote_of_the_day(mock_info):
    assert resolve_quote_of_the_day(mock_info) in ("Take it easy", "Salvation lies within")


def test_resolve_random(mock_info):
    assert 0.0 <= resolve_random(mock_info) < 1.0


def test_resolve_roll_three_dice(mock_info):
    rolls = resolve_roll_three_dice(mock_info)

    assert len(rolls) == 3
    assert all(1 <= value <= 6 for value in rolls)


class TestResolveRollDice:
    def test_rolls_requested_dice(self, mock_info):
        rolls = resolve_roll_dice(mock_info, 3, 6)

        assert len(rolls) == 3
        assert all(1 <= value <= 6 for value in rolls)

    def test_missing_sides_means_six(self, mock_info):
        rolls = resolve_roll_dice(mock_info, 40, None)

        assert all(1 <= value <= 6 for value in rolls)

    def test_zero_dice(self, mock_info):
        assert resolve_roll_dice(mock_info, 0, 6) == []

    def test_negative_dice_raises(self, mock_info):
        with pytest.raises(InvalidArgument):
            resolve_roll_dice(mock_info, -1, 6)


class TestResolveDie:
    def test_returns_graphql_die(self, mock_info):
        die = resolve_die(mock_info, 10)

        assert isinstance(die, RandomDie)
        assert die.num_sides == 10

    @pytest.mark.parametrize("num_sides", [None, 0])
    def test_defaults_to_six(self, mock_info, num_sides):
        assert resolve_die(mock_info, num_sides).num_sides == 6

    def test_negative_sides_raises(self, mock_info):
        with pytest.raises(InvalidArgument):
            resolve_die(mock_info, -2)

    def test_field_resolvers_roll_the_die(self, mock_info):
        die = resolve_die(mock_info, 3)

        assert 1 <= resolve_die_roll_once(die, mock_info) <= 3
        rolls = resolve_die_roll(die, mock_info, 5)
        assert len(rolls) == 5
        assert all(1 <= value <= 3 for value in rolls)

    def test_negative_rolls_raises(self, mock_info):
        die = resolve_die(mock_info, 3)

        with pytest.raises(InvalidArgument):
            resolve_die_roll(die, mock_info, -3)
