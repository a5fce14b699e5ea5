import unittest

from tetris_grid import Grid
from tetris_piece import CATALOG, Piece, rotate_cw
from tetris_rng import PieceRandom


def place(kind, grid, x, y):
    return Piece(CATALOG[kind], [list(r) for r in CATALOG[kind].layout], x, y, grid)


class RotationTests(unittest.TestCase):
    def test_quarter_turn_is_clockwise(self):
        self.assertEqual(rotate_cw([[0, 1, 0], [1, 1, 1]]),
                         [[1, 0], [1, 1], [1, 0]])
        self.assertEqual(rotate_cw([[0, 0, 0, 0], [1, 1, 1, 1]]),
                         [[1, 0], [1, 0], [1, 0], [1, 0]])

    def test_four_turns_restore_every_layout(self):
        for kind in CATALOG.values():
            layout = [list(r) for r in kind.layout]
            m = layout
            for _ in range(4):
                m = rotate_cw(m)
            self.assertEqual(m, layout, kind.name)

    def test_rotating_a_piece_leaves_catalog_alone(self):
        g = Grid(10, 16)
        p = place("T", g, 3, 5)
        self.assertTrue(p.try_rotate())
        self.assertEqual(CATALOG["T"].layout, ((0, 1, 0), (1, 1, 1)))
        self.assertEqual(p.layout, [[1, 0], [1, 1], [1, 0]])
        self.assertEqual((p.x, p.y), (3, 5))


class SpawnTests(unittest.TestCase):
    def test_spawn_column_and_row(self):
        g = Grid(10, 16)
        rng = PieceRandom(seed=7)
        for _ in range(200):
            kind = rng.next_kind()
            p = Piece.spawn(kind, g, rng)
            self.assertTrue(0 <= p.x <= g.width - kind.width)
            self.assertEqual(p.y, -kind.height)

    def test_spawned_piece_owns_its_layout(self):
        g = Grid(10, 16)
        rng = PieceRandom(seed=1)
        a = Piece.spawn(CATALOG["L"], g, rng)
        b = Piece.spawn(CATALOG["L"], g, rng)
        a.layout[0][0] = 9
        self.assertEqual(b.layout[0][0], 0)


class CollisionTests(unittest.TestCase):
    def test_bounds_collide_on_empty_grid(self):
        g = Grid(10, 16)
        for kind in CATALOG:
            p = place(kind, g, 0, 0)
            self.assertTrue(p.would_collide(-1, 0), kind)
            self.assertTrue(p.would_collide(g.width - p.kind.width + 1, 0), kind)
            self.assertTrue(p.would_collide(0, g.height - p.kind.height + 1), kind)
            self.assertFalse(p.would_collide(g.width - p.kind.width, g.height - p.kind.height), kind)

    def test_bounds_ignore_grid_contents(self):
        g = Grid(4, 4)
        for r in range(4):
            for c in range(4):
                g.occupy(r, c, "x")
        p = place("O", g, 2, -2)
        self.assertTrue(p.would_collide(1, 0))

    def test_overlap_with_locked_cell(self):
        g = Grid(10, 16)
        g.occupy(10, 4, "x")
        p = place("O", g, 3, 8)
        self.assertTrue(p.would_collide(0, 1))
        self.assertFalse(p.would_collide(-1, 0))

    def test_cells_above_grid_never_overlap(self):
        g = Grid(10, 16)
        p = place("I", g, 0, -2)
        self.assertFalse(p.would_collide(0, 0))
        self.assertFalse(p.would_collide(0, 1))

    def test_rejected_move_changes_nothing(self):
        g = Grid(10, 16)
        p = place("J", g, 0, 3)
        self.assertFalse(p.try_move(-1, 0))
        self.assertEqual((p.x, p.y), (0, 3))
        self.assertTrue(p.try_move(1, 1))
        self.assertEqual((p.x, p.y), (1, 4))

    def test_rotation_blocked_without_wall_kick(self):
        g = Grid(10, 16)
        p = place("I", g, 0, 12)
        # vertical I needs rows 12..15 in column 0
        g.occupy(15, 0, "x")
        before = [r[:] for r in p.layout]
        self.assertFalse(p.try_rotate())
        self.assertEqual(p.layout, before)
        self.assertEqual((p.x, p.y), (0, 12))


class GameOverCheckTests(unittest.TestCase):
    def test_blocked_entry_flags_game_over(self):
        g = Grid(10, 16)
        g.occupy(0, 4, "x")
        p = place("O", g, 3, -2)
        self.assertTrue(p.would_collide(0, 1))
        self.assertTrue(p.is_game_over_after_move(0, 1))

    def test_landing_inside_grid_is_not_game_over(self):
        g = Grid(10, 16)
        g.occupy(10, 4, "x")
        p = place("O", g, 3, 8)
        self.assertFalse(p.is_game_over_after_move(0, 1))

    def test_collision_probe_is_pure(self):
        g = Grid(10, 16)
        g.occupy(1, 0, "x")
        p = place("T", g, 0, -1)
        self.assertTrue(p.would_collide(0, 0, rotate_cw(p.layout)))
        self.assertFalse(p.try_rotate())
        self.assertEqual(p.layout, [[0, 1, 0], [1, 1, 1]])


class LockTests(unittest.TestCase):
    def test_lock_writes_only_filled_cells(self):
        g = Grid(10, 16)
        g.occupy(15, 9, "#old")
        p = place("S", g, 2, 14)
        p.lock_into(g)
        expected = {(14, 3), (14, 4), (15, 2), (15, 3), (15, 9)}
        got = {(r, c) for r, c, _ in g.occupied_cells()}
        self.assertEqual(got, expected)
        self.assertEqual(g.color_at(14, 3), CATALOG["S"].color)
        self.assertEqual(g.color_at(15, 9), "#old")
        self.assertFalse(g.is_occupied(14, 2))


if __name__ == "__main__":
    unittest.main()
