"""Tests for app.services.inventory against an in-memory SQLite database."""

import unittest
from decimal import Decimal

from app.models import Game
from app.schemas.inventory import INT32_MAX, GameWrite
from app.services import inventory
from app.services.errors import AuthorizationError, NotFoundError

from support import (
    admin_identity,
    make_engine,
    make_session_factory,
    seed_game,
    seed_platforms,
    staff_identity,
)


def _game_data(**kwargs: object) -> GameWrite:
    """Build a valid GameWrite using the JSON field names."""
    fields = {
        "GameName": "Halo",
        "Price": 59.99,
        "Rating": 5,
        "Genre": "FPS",
        "Quantity": 10,
        "Platform": "Xbox Series X",
    }
    fields.update(kwargs)
    return GameWrite.model_validate(fields)


class InventoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine()
        self.db = make_session_factory(self.engine)()
        self.platform_ids = seed_platforms(self.db)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def _row_count(self) -> int:
        return self.db.query(Game).count()


class TestAddGame(InventoryTestCase):
    def test_add_returns_id_and_persists_fields(self) -> None:
        game_id = inventory.add_game(self.db, admin_identity(), _game_data())
        game = self.db.get(Game, game_id)
        self.assertEqual(game.name, "Halo")
        self.assertEqual(game.price, Decimal("59.99"))
        self.assertEqual(game.platform_id, self.platform_ids["Xbox Series X"])
        self.assertIsNone(game.image_url)

    def test_unknown_platform_leaves_no_row(self) -> None:
        before = self._row_count()
        with self.assertRaises(NotFoundError) as ctx:
            inventory.add_game(self.db, admin_identity(), _game_data(Platform="Dreamcast"))
        self.assertEqual(ctx.exception.message, "Invalid platform selected")
        self.assertEqual(self._row_count(), before)

    def test_staff_cannot_add(self) -> None:
        with self.assertRaises(AuthorizationError):
            inventory.add_game(self.db, staff_identity(), _game_data())
        self.assertEqual(self._row_count(), 0)


class TestUpdateGame(InventoryTestCase):
    def test_replaces_all_fields(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"])
        inventory.update_game(
            self.db,
            admin_identity(),
            game.id,
            _game_data(GameName="Tekken 8", Genre="Fighting", Price="69.50", ImageUrl="/uploads/t8.png"),
        )
        self.db.expire_all()
        updated = self.db.get(Game, game.id)
        self.assertEqual(updated.name, "Tekken 8")
        self.assertEqual(updated.genre, "Fighting")
        self.assertEqual(updated.price, Decimal("69.50"))
        self.assertEqual(updated.quantity, 10)
        self.assertEqual(updated.platform_id, self.platform_ids["Xbox Series X"])
        self.assertEqual(updated.image_url, "/uploads/t8.png")

    def test_unknown_platform_rolls_back(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"], name="Zelda")
        with self.assertRaises(NotFoundError):
            inventory.update_game(
                self.db, admin_identity(), game.id, _game_data(Platform="Dreamcast")
            )
        self.db.expire_all()
        self.assertEqual(self.db.get(Game, game.id).name, "Zelda")

    def test_missing_game_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            inventory.update_game(self.db, admin_identity(), 999, _game_data())

    def test_staff_cannot_update(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"], name="Zelda")
        with self.assertRaises(AuthorizationError):
            inventory.update_game(self.db, staff_identity(), game.id, _game_data())
        self.db.expire_all()
        self.assertEqual(self.db.get(Game, game.id).name, "Zelda")


class TestDeleteGame(InventoryTestCase):
    def test_deletes_row(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"])
        inventory.delete_game(self.db, admin_identity(), game.id)
        self.assertEqual(self._row_count(), 0)

    def test_missing_game_raises_not_found(self) -> None:
        seed_game(self.db, self.platform_ids["PS5"])
        with self.assertRaises(NotFoundError):
            inventory.delete_game(self.db, admin_identity(), 999)
        self.assertEqual(self._row_count(), 1)

    def test_staff_cannot_delete(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"])
        with self.assertRaises(AuthorizationError):
            inventory.delete_game(self.db, staff_identity(), game.id)
        self.assertEqual(self._row_count(), 1)


class TestAdjustQuantity(InventoryTestCase):
    """Result is quantity + delta clamped to 0..INT32_MAX."""

    def test_clamps_at_zero(self) -> None:
        cases = [(0, 0), (0, -1), (3, -5), (3, 2), (10, -10), (1, -1000), (5, 1000)]
        for start, delta in cases:
            with self.subTest(start=start, delta=delta):
                game = seed_game(self.db, self.platform_ids["PS5"], quantity=start)
                new_quantity = inventory.adjust_quantity(
                    self.db, admin_identity(), game.id, delta
                )
                self.assertEqual(new_quantity, max(0, start + delta))
                self.db.expire_all()
                self.assertEqual(self.db.get(Game, game.id).quantity, new_quantity)

    def test_repeated_decrement_stays_at_zero(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"], quantity=3)
        self.assertEqual(inventory.adjust_quantity(self.db, admin_identity(), game.id, -5), 0)
        self.assertEqual(inventory.adjust_quantity(self.db, admin_identity(), game.id, -5), 0)

    def test_increment_stays_within_column_range(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"], quantity=INT32_MAX - 1)
        self.assertEqual(
            inventory.adjust_quantity(self.db, admin_identity(), game.id, INT32_MAX), INT32_MAX
        )
        self.db.expire_all()
        self.assertEqual(self.db.get(Game, game.id).quantity, INT32_MAX)

    def test_missing_game_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            inventory.adjust_quantity(self.db, admin_identity(), 999, 1)
        self.assertEqual(ctx.exception.message, "Game not found")

    def test_staff_cannot_adjust(self) -> None:
        game = seed_game(self.db, self.platform_ids["PS5"], quantity=3)
        with self.assertRaises(AuthorizationError):
            inventory.adjust_quantity(self.db, staff_identity(), game.id, 4)
        self.db.expire_all()
        self.assertEqual(self.db.get(Game, game.id).quantity, 3)


class TestListing(InventoryTestCase):
    def setUp(self) -> None:
        super().setUp()
        seed_game(self.db, self.platform_ids["PS5"], name="Zelda", genre="Adventure")
        seed_game(self.db, self.platform_ids["Xbox Series X"], name="Halo", genre="FPS")
        seed_game(self.db, self.platform_ids["PS5"], name="Tekken", genre="Fighting")

    def test_lists_everything_without_filters(self) -> None:
        games = inventory.list_games(self.db)
        self.assertEqual([g.name for g in games], ["Zelda", "Halo", "Tekken"])

    def test_platform_filter(self) -> None:
        games = inventory.list_games(self.db, platform="PS5")
        self.assertEqual({g.name for g in games}, {"Zelda", "Tekken"})
        self.assertTrue(all(g.platform == "PS5" for g in games))

    def test_platform_and_genre_filters_combine(self) -> None:
        games = inventory.list_games(self.db, platform="PS5", genre="Fighting")
        self.assertEqual([g.name for g in games], ["Tekken"])

    def test_price_is_float(self) -> None:
        game = inventory.list_games(self.db, platform="Xbox Series X")[0]
        self.assertIsInstance(game.price, float)
        self.assertEqual(game.price, 49.99)

    def test_platforms_sorted_by_name(self) -> None:
        self.assertEqual(
            inventory.list_platforms(self.db),
            ["Nintendo Switch", "PS5", "Xbox Series X"],
        )


if __name__ == "__main__":
    unittest.main()
