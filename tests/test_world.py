import random

import pytest

from leapup.collision import AlphaMask
from leapup.entities import FIREBALL_SPAWN_X, FIREBALL_SPEED, Platform
from leapup.world import GameConfig, Outcome, World, find_gaps


def _mask(width, height, alpha=255):
    return AlphaMask.from_rows([[alpha] * width for _ in range(height)])


def _world(seed=1, player_alpha=255, config=None):
    config = config or GameConfig()
    return World.new(
        config,
        random.Random(seed),
        _mask(config.player_width, config.player_height, player_alpha),
        _mask(config.platform_width, config.platform_height),
        _mask(config.fireball_width, config.fireball_height),
    )


def test_find_gaps_centres_fireball_between_platforms():
    platforms = [Platform(0.0, 0.0), Platform(0.0, 100.0)]
    assert find_gaps(platforms, 15, 30) == [pytest.approx(42.5)]


def test_find_gaps_skips_narrow_gaps():
    platforms = [Platform(0.0, 0.0), Platform(0.0, 50.0), Platform(0.0, 60.0)]
    assert find_gaps(platforms, 15, 30) == []


def test_find_gaps_lie_between_platforms():
    platforms = [Platform(0.0, float(y)) for y in (0, 80, 200, 330)]
    gaps = find_gaps(platforms, 15, 30)
    assert len(gaps) == 3
    for gap, upper, lower in zip(gaps, platforms, platforms[1:]):
        assert upper.y + 15 < gap < lower.y - 30


def test_new_lays_out_evenly_spaced_platforms():
    world = _world()
    config = world.config
    assert len(world.platforms) == config.platform_count
    spacing = config.window_height // config.platform_count
    assert [p.y for p in world.platforms] == [float(i * spacing) for i in range(config.platform_count)]
    for platform in world.platforms:
        assert 0 <= platform.x < config.window_width - config.platform_width


def test_new_stands_player_on_middle_platform():
    world = _world()
    middle = world.platforms[world.config.platform_count // 2]
    bounds = world.player_bounds()
    assert bounds.bottom == pytest.approx(middle.y)
    assert bounds.left + bounds.width / 2 == pytest.approx(middle.x + world.config.platform_width / 2)


def test_player_bounds_have_player_size():
    world = _world()
    bounds = world.player_bounds()
    assert (bounds.width, bounds.height) == (world.config.player_width, world.config.player_height)


def test_same_seed_gives_same_world():
    first, second = _world(seed=7), _world(seed=7)
    assert first.platforms == second.platforms
    for _ in range(30):
        first.step(False, True, 0.5)
        second.step(False, True, 0.5)
    assert (first.x, first.y, first.vy) == (second.x, second.y, second.vy)


def test_player_bounces_off_platform():
    world = _world()
    assert world.step(False, False, 0.0) is Outcome.RUNNING
    assert world.vy == -world.config.jump_speed
    assert any(world.player_bounds().bottom == pytest.approx(p.y) for p in world.platforms)


def test_transparent_player_does_not_bounce():
    world = _world(player_alpha=0)
    world.step(False, False, 0.0)
    assert world.vy == pytest.approx(world.config.gravity)


def test_player_falls_without_platforms():
    world = _world()
    world.platforms = []
    outcomes = [world.step(False, False, 0.0) for _ in range(200)]
    assert Outcome.FELL in outcomes


def test_movement_keys_shift_player():
    world = _world()
    start = world.x
    world.step(False, True, 0.0)
    assert world.x == pytest.approx(start + world.config.move_speed)
    world.step(True, False, 0.0)
    assert world.x == pytest.approx(start)


def test_fireball_waits_for_interval():
    world = _world()
    world.step(False, False, world.config.fireball_interval - 1)
    assert not world.fireball.active


def test_fireball_spawns_after_interval():
    world = _world()
    world.step(False, False, world.config.fireball_interval + 0.5)
    assert world.fireball.active
    assert world.fireball.x == pytest.approx(FIREBALL_SPAWN_X + FIREBALL_SPEED)
    assert world.fireball_timer == world.config.fireball_interval + 0.5


def _fireball_on_player(world):
    bounds = world.player_bounds()
    world.fireball.spawn(bounds.top + 10)
    world.fireball.x = bounds.left


def test_fireball_hit_ends_game():
    world = _world()
    _fireball_on_player(world)
    assert world.step(False, False, 0.0) is Outcome.HIT


def test_shield_aura_absorbs_fireball():
    world = _world()
    world.shielded = True
    world.shield_started = 0.0
    _fireball_on_player(world)
    assert world.step(False, False, 0.0) is Outcome.RUNNING
    assert not world.fireball.active
    assert not world.shielded


def test_shield_wears_off():
    world = _world()
    world.shielded = True
    world.shield_started = 0.0
    world.step(False, False, world.config.shield_duration + 1)
    assert not world.shielded


def test_player_picks_up_shield():
    world = _world()
    bounds = world.player_bounds()
    world.shield.spawn(bounds.left, bounds.top)
    world.shield_spawned = 0.0
    world.step(False, False, 1.0)
    assert not world.shield.active
    assert world.shielded
    assert world.shield_started == 1.0


def test_ignored_shield_despawns():
    world = _world()
    world.shield.spawn(0.0, 500.0)
    world.shield_spawned = 0.0
    world.step(False, False, world.config.shield_lifetime + 1)
    assert not world.shield.active
    assert not world.shielded


def test_shield_spawns_after_long_wait():
    world = _world()
    world.step(False, False, 100.0)
    assert world.shield.active or world.shielded
    assert world.shield_spawned == 100.0
    assert world.shield_spawn_timer == 100.0