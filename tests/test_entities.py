import curses
import random

from skyracer.entities import (
    Meteor,
    Ship,
    Shot,
    add_shot,
    create_ship,
    draw,
    resolve_hits,
    ship_collides,
    update_meteors,
    update_shots,
)


class FakeRng:
    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def randrange(self, n):
        self.bounds.append(n)
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


class RecordingTerminal:
    def __init__(self):
        self.chars = []
        self.strings = []

    def put_char(self, x, y, ch):
        self.chars.append((x, y, ch))

    def put_string(self, x, y, text):
        self.strings.append((x, y, text))


def test_create_ship_centred_near_bottom():
    assert create_ship(80, 24) == Ship(40, 22)


def test_move_left_and_right():
    ship = Ship(5, 10)
    ship.move(curses.KEY_LEFT, 80)
    assert ship.x == 5 - 1
    ship.move(curses.KEY_RIGHT, 80)
    ship.move(curses.KEY_RIGHT, 80)
    assert ship.x == 5 + 1
    assert ship.y == 10


def test_move_stops_at_left_border():
    ship = Ship(1, 10)
    ship.move(curses.KEY_LEFT, 80)
    assert ship.x == 1


def test_move_stops_at_right_border():
    ship = Ship(78, 10)
    ship.move(curses.KEY_RIGHT, 80)
    assert ship.x == 78


def test_other_keys_do_not_move():
    ship = Ship(5, 10)
    ship.move(ord("a"), 80)
    assert ship == Ship(5, 10)


def test_meteor_spawns_and_falls_in_same_step():
    meteors = update_meteors([], 80, 24, FakeRng([2, 9]))
    assert meteors == [Meteor(9 + 1, 2)]


def test_no_spawn_when_roll_too_high():
    meteors = update_meteors([Meteor(5, 5)], 80, 24, FakeRng([3]))
    assert meteors == [Meteor(5, 6)]


def test_new_meteor_comes_first():
    meteors = update_meteors([Meteor(5, 5)], 80, 24, FakeRng([0, 0]))
    assert meteors[1] == Meteor(5, 6)
    assert meteors[0].x == 1


def test_meteors_past_bottom_are_removed():
    meteors = update_meteors([Meteor(5, 24), Meteor(6, 23)], 80, 24, FakeRng([9]))
    assert meteors == [Meteor(6, 24)]


def test_meteors_stay_inside_screen():
    rng = random.Random(1234)
    meteors = []
    for _ in range(300):
        meteors = update_meteors(meteors, 20, 10, rng)
        for meteor in meteors:
            assert 1 <= meteor.x <= 18
            assert 2 <= meteor.y <= 10


def test_ship_collides():
    ship = Ship(4, 8)
    assert ship_collides(ship, [Meteor(1, 1), Meteor(4, 8)]) is True
    assert ship_collides(ship, [Meteor(4, 7), Meteor(3, 8)]) is False
    assert ship_collides(ship, []) is False


def test_add_shot_prepends():
    shots = add_shot([Shot(1, 1)], 3, 9)
    assert shots == [Shot(3, 9), Shot(1, 1)]


def test_update_shots_moves_up_and_drops_off_top():
    shots = update_shots([Shot(3, 1), Shot(3, 5)])
    assert shots == [Shot(3, 5 - 1)]


def test_resolve_hit_removes_pair():
    meteors, shots, hits = resolve_hits(
        [Meteor(1, 1), Meteor(3, 4)], [Shot(9, 9), Shot(3, 4)]
    )
    assert hits == 1
    assert meteors == [Meteor(1, 1)]
    assert shots == [Shot(9, 9)]


def test_resolve_only_one_hit_per_call():
    meteors, shots, hits = resolve_hits(
        [Meteor(1, 1), Meteor(2, 2)], [Shot(1, 1), Shot(2, 2)]
    )
    assert hits == 1
    assert meteors == [Meteor(2, 2)]
    assert shots == [Shot(2, 2)]


def test_resolve_without_hits_keeps_everything():
    meteors, shots, hits = resolve_hits([Meteor(1, 1)], [Shot(1, 2)])
    assert (meteors, shots, hits) == ([Meteor(1, 1)], [Shot(1, 2)], 0)


def test_draw_places_every_entity_and_score():
    terminal = RecordingTerminal()
    draw(terminal, Ship(5, 20), [Meteor(2, 3)], [Shot(5, 19)], 7)
    assert terminal.chars == [(5, 20, "^"), (2, 3, "*"), (5, 19, "|")]
    assert terminal.strings == [(2, 1, "Pontos: 7")]


def test_spawn_column_drawn_from_inner_width():
    rng = FakeRng([0, 2])
    meteors = update_meteors([], 5, 10, rng)
    assert rng.bounds == [10, 5 - 2]
    assert meteors == [Meteor(2 + 1, 2)]