#!/usr/bin/env python3
"""
Tests for the player streaming service against the default roster.
"""

import unittest

from player_streams import DEFAULT_ROSTER, PlayerStreamService, default_roster


def counting_roster(pulled):
    """Default roster provider recording the id of every player produced."""
    def provider():
        for player in default_roster():
            pulled.append(player.id)
            yield player
    return provider


class TestPlayerStreamService(unittest.IsolatedAsyncioTestCase):
    """Test ordering, filtering and mapping of the roster streams."""

    def setUp(self):
        self.pulled = []
        self.service = PlayerStreamService(counting_roster(self.pulled), delay=0)

    async def test_stream_players_in_literal_order(self):
        players = await self.service.stream_players().collect()

        self.assertEqual([p.rank for p in players], [row[2] for row in DEFAULT_ROSTER])
        self.assertEqual([p.id for p in players], [1, 2, 3, 4, 5])
        self.assertEqual(self.pulled, [1, 2, 3, 4, 5])

    async def test_filter_by_spain(self):
        players = await self.service.filter_by_country("Spain").collect()

        self.assertEqual([p.rank for p in players], [1, 3])
        self.assertEqual([p.name for p in players], ["Rafael Nadal", "Carlos Alcaraz"])

    async def test_filter_matches_exactly_the_source_elements(self):
        everyone = await self.service.stream_players().collect()
        for country in {p.country for p in everyone}:
            with self.subTest(country=country):
                filtered = await self.service.filter_by_country(country).collect()
                expected = [p for p in everyone if p.country == country]
                self.assertEqual(filtered, expected)

    async def test_filter_without_match_drains_source(self):
        players = await self.service.filter_by_country("France").collect()

        self.assertEqual(players, [])
        self.assertEqual(self.pulled, [1, 2, 3, 4, 5])

    async def test_filter_is_exact_match(self):
        self.assertEqual(await self.service.filter_by_country("spain").collect(), [])
        self.assertEqual(await self.service.filter_by_country(" Spain").collect(), [])

    async def test_filter_none_matches_nothing(self):
        players = await self.service.filter_by_country(None).collect()

        self.assertEqual(players, [])
        self.assertEqual(self.pulled, [1, 2, 3, 4, 5])

    async def test_filter_stops_pulling_when_consumer_stops(self):
        first = await self.service.filter_by_country("Spain").first()

        self.assertEqual(first.name, "Rafael Nadal")
        self.assertEqual(self.pulled, [1])

    async def test_map_to_names(self):
        players = await self.service.stream_players().collect()
        names = await self.service.map_to_names().collect()

        self.assertEqual(len(names), len(players))
        self.assertEqual(names, [p.name for p in players])
        self.assertEqual(names, [
            "Rafael Nadal",
            "Novak Djokovic",
            "Carlos Alcaraz",
            "Roger Federer",
            "Andy Murray",
        ])

    async def test_independent_drains_are_identical(self):
        stream = self.service.stream_players()
        first_run = await stream.collect()
        second_run = await stream.collect()

        self.assertEqual(first_run, second_run)
        self.assertIsNot(first_run[0], second_run[0])

    async def test_find_by_id(self):
        player = await self.service.find_by_id(2)

        self.assertEqual(player.name, "Novak Djokovic")
        self.assertEqual(self.pulled, [1, 2])
        self.assertIsNone(await PlayerStreamService(delay=0).find_by_id(99))

    async def test_top_n(self):
        top = await self.service.top_n(2).collect()

        self.assertEqual([p.rank for p in top], [1, 2])
        self.assertEqual(self.pulled, [1, 2])


if __name__ == "__main__":
    unittest.main()
