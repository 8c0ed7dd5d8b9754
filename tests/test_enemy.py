import pytest

from tinyinvaders.effect import Effect
from tinyinvaders.enemy import (
    BEAM_INTERVAL,
    ENEMY_HEIGHT,
    ENEMY_INIT_X,
    ENEMY_INIT_Y,
    ENEMY_WIDTH,
    SWAY_PERIOD,
    Enemy,
    EnemyType,
)
from tinyinvaders.enemy_beam import EnemyBeam
from tinyinvaders.geometry import Point, Rect
from tinyinvaders.graphics import DrawCall, RecordingRenderer
from tinyinvaders.world import World


@pytest.fixture
def world():
    return World(RecordingRenderer())


@pytest.mark.parametrize(
    "kind, image",
    [
        (EnemyType.ZAKO, "tiny_ship10.png"),
        (EnemyType.MID, "tiny_ship18.png"),
        (EnemyType.KNIGHT, "tiny_ship16.png"),
        (EnemyType.BOSS, "tiny_ship9.png"),
    ],
)
def test_each_type_loads_its_image(world, kind, image):
    enemy = Enemy(world, 0, kind)
    assert world.renderer.images[enemy.image].endswith(image)


def test_initial_state(world):
    enemy = Enemy(world, 7, EnemyType.MID)
    assert enemy.enemy_id == 7
    assert (enemy.x, enemy.y) == (ENEMY_INIT_X, ENEMY_INIT_Y)
    assert enemy.rect() == Rect(ENEMY_INIT_X, ENEMY_INIT_Y, ENEMY_WIDTH, ENEMY_HEIGHT)
    assert world.pending == [enemy]


def test_sway_stays_within_half_range(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO)
    enemy.x_origin = 200.0
    enemy.x_move_max = 100.0
    world.dt = 0.37
    for _ in range(60):
        enemy.update()
        assert abs(enemy.x - enemy.x_origin) <= enemy.x_move_max / 2 + 1e-6


def test_sway_returns_to_origin_after_period(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO)
    enemy.x_origin = 300.0
    enemy.x_move_max = 80.0
    enemy.set_pos(0, 55)
    world.dt = SWAY_PERIOD
    enemy.update()
    assert enemy.x == pytest.approx(300.0, abs=1e-3)
    assert enemy.y == 55


def test_beam_fires_after_timer_expires(world):
    enemy = Enemy(world, 0, EnemyType.BOSS)
    world.flush_new()
    world.dt = BEAM_INTERVAL + 1
    enemy.update()
    assert world.pending == []
    enemy.update()
    beams = [obj for obj in world.pending if isinstance(obj, EnemyBeam)]
    assert len(beams) == 1
    assert beams[0].pos == Point(enemy.x + ENEMY_WIDTH / 2, enemy.y + ENEMY_HEIGHT)


def test_beam_timer_is_shared_in_a_world(world):
    first = Enemy(world, 0, EnemyType.ZAKO)
    second = Enemy(world, 1, EnemyType.ZAKO)
    world.flush_new()
    world.dt = BEAM_INTERVAL + 1
    first.update()
    second.update()
    beams = [obj for obj in world.pending if isinstance(obj, EnemyBeam)]
    assert len(beams) == 1
    assert beams[0].pos.x == second.x + ENEMY_WIDTH / 2


def test_destroy_leaves_effect(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO)
    enemy.set_pos(12, 34)
    world.flush_new()
    enemy.destroy()
    effects = [obj for obj in world.pending if isinstance(obj, Effect)]
    assert len(effects) == 1
    assert effects[0].pos == Point(12, 34)


def test_draw(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO)
    enemy.draw(world.renderer)
    assert world.renderer.draws == [
        DrawCall(enemy.image, ENEMY_INIT_X, ENEMY_INIT_Y, ENEMY_WIDTH, ENEMY_HEIGHT)
    ]