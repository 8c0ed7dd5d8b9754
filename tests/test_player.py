import pytest

from tinyinvaders.bullet import Bullet
from tinyinvaders.effect import Effect
from tinyinvaders.enemy_beam import EnemyBeam
from tinyinvaders.geometry import WIN_HEIGHT, WIN_WIDTH, Point
from tinyinvaders.graphics import DrawCall, RecordingRenderer
from tinyinvaders.input import Key, KeyState
from tinyinvaders.player import (
    BULLET_COUNT,
    BULLET_MARGIN,
    PLAYER_BASE_MARGIN,
    PLAYER_HEIGHT,
    PLAYER_SPEED,
    PLAYER_WIDTH,
    Player,
)
from tinyinvaders.world import World


@pytest.fixture
def world():
    return World(RecordingRenderer())


@pytest.fixture
def keys():
    return KeyState()


@pytest.fixture
def player(world, keys):
    p = Player(world, keys)
    world.flush_new()
    world.dt = 0.1
    return p


def test_starts_centered_near_bottom(player):
    assert player.x + PLAYER_WIDTH / 2 == WIN_WIDTH / 2
    assert player.y + PLAYER_HEIGHT + PLAYER_BASE_MARGIN == WIN_HEIGHT
    assert player.dead is False


def test_bullets_join_world_before_player(world, keys):
    p = Player(world, keys)
    assert len(p.bullets) == BULLET_COUNT
    assert world.pending == [*p.bullets, p]
    assert all(isinstance(b, Bullet) and not b.fired for b in p.bullets)


def test_shoot_fires_first_ready_bullet(player):
    player.shoot()
    first = player.bullets[0]
    assert first.fired is True
    assert (first.x, first.y) == (player.x + BULLET_MARGIN, player.y)
    player.shoot()
    assert [b.fired for b in player.bullets[:2]] == [True, True]


def test_shoot_with_no_ready_bullet_changes_nothing(player):
    for b in player.bullets:
        b.fired = True
        b.set_pos(1, 2)
    player.shoot()
    assert all((b.x, b.y) == (1, 2) for b in player.bullets)


def test_moves_only_while_key_is_kept(player, keys):
    start = player.x
    keys.update({Key.LEFT})
    player.update()
    assert player.x == start
    keys.update({Key.LEFT})
    player.update()
    assert player.x == pytest.approx(start - PLAYER_SPEED * 0.1)
    keys.update({Key.RIGHT})
    player.update()
    keys.update({Key.RIGHT})
    player.update()
    assert player.x == pytest.approx(start)


def test_stays_inside_screen(player, keys):
    player.x = 0.0
    keys.update({Key.LEFT})
    keys.update({Key.LEFT})
    player.update()
    assert player.x == 0.0


def test_space_fires_once_per_press_and_respects_interval(player, keys):
    keys.update({Key.SPACE})
    player.update()
    assert sum(b.fired for b in player.bullets) == 1
    keys.update({Key.SPACE})
    player.update()
    assert sum(b.fired for b in player.bullets) == 1
    keys.update(set())
    player.update()
    keys.update({Key.SPACE})
    player.update()
    assert sum(b.fired for b in player.bullets) == 1


def test_beam_hit_kills_player(world, player):
    beam = EnemyBeam(world, Point(player.x + 5, player.y + 5))
    world.flush_new()
    old = Point(player.x, player.y)
    player.update()
    assert player.dead is True
    assert beam.fired is False
    effects = [obj for obj in world.pending if isinstance(obj, Effect)]
    assert len(effects) == 1
    assert effects[0].pos == old
    assert player.x < 0 and player.y < 0


def test_unfired_beam_is_harmless(world, player):
    beam = EnemyBeam(world, Point(player.x, player.y))
    beam.fired = False
    world.flush_new()
    player.update()
    assert player.dead is False


def test_kill_twice_makes_one_effect(world, player):
    player.kill()
    player.kill()
    assert sum(isinstance(obj, Effect) for obj in world.pending) == 1


def test_dead_player_neither_draws_nor_moves(world, player, keys):
    player.draw(world.renderer)
    assert world.renderer.draws == [
        DrawCall(player.image, player.x, player.y, PLAYER_WIDTH, PLAYER_HEIGHT)
    ]
    world.renderer.clear()
    player.kill()
    x = player.x
    keys.update({Key.RIGHT})
    keys.update({Key.RIGHT})
    player.update()
    player.draw(world.renderer)
    assert player.x == x
    assert world.renderer.draws == []