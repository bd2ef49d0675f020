from pygame.math import Vector2

from timmy.collider import CircleCollider
from timmy.controllers import EnemyAI, PlayerController
from timmy.game import GameManager
from timmy.gameobject import Layer
from timmy.health import Health
from timmy.lifetime import Lifetime
from timmy.movement import Magnet, Velocity
from timmy.prefabs import create_coin, create_knight, create_player
from timmy.render import SpriteRenderer, TextRenderer
from timmy.weapons import FireWeapon
from timmy.world import World


def test_create_player_components():
    world = World()
    player = create_player(world, (3.0, 4.0))
    assert player.name == "player1"
    assert player.position == Vector2(3.0, 4.0)
    assert player.get_component(PlayerController).speed == 100.0
    weapon = player.get_component(FireWeapon)
    assert weapon.range == 200.0
    assert weapon.projectile_speed == 300.0
    colliders = [c for c in player.components if isinstance(c, CircleCollider)]
    assert [c.radius for c in colliders] == [8.0, 50.0]
    assert [c.is_trigger for c in colliders] == [False, True]
    assert all(c in world.active_colliders for c in colliders)
    sprite = player.get_component(SpriteRenderer)
    assert sprite.current_clip == "Idle"
    assert sprite.anchor_ratio == Vector2(0.5, 0.75)


def test_player_magnet_attracts_items():
    world = World()
    player = create_player(world, (0.0, 0.0))
    coin = create_coin(world, (30.0, 0.0))
    world.resolve_collisions()
    assert coin.get_component(Magnet).target is player


def test_create_knight_components():
    world = World()
    target = world.create_object("target")
    knight = create_knight(world, (10.0, 20.0), target)
    assert knight.layer == Layer.ENEMY
    assert knight.position == Vector2(10.0, 20.0)
    assert knight.get_component(EnemyAI).target is target
    assert knight.get_component(EnemyAI).speed == 35.0
    assert knight.get_component(Velocity).damping == 15.0
    assert knight.get_component(Health).max_hp == 3.0
    assert knight.get_component(CircleCollider).radius == 8.0


def test_knight_damage_text_and_coin_drop():
    world = World()
    target = world.create_object("target")
    knight = create_knight(world, (10.0, 20.0), target)

    knight.get_component(Health).take_damage(3.0)

    label = world.find_by_name("text")
    text = label.get_component(TextRenderer)
    assert text.text == "3"
    assert text.fade_out
    assert label.get_component(Lifetime).timer.target_time == 1.0
    assert label.get_component(Velocity).velocity == Vector2(0.0, -100.0)

    coin = world.find_by_name("coin")
    assert coin.position == knight.position
    assert not knight.alive


def test_create_coin_layer_and_trigger():
    world = World()
    coin = create_coin(world, (1.0, 1.0))
    assert coin.layer == Layer.ITEM
    assert coin.get_component(CircleCollider).is_trigger
    assert coin.get_component(SpriteRenderer).current_clip == "Idle"


def test_coin_collection_adds_to_game():
    world = World()
    coin = create_coin(world, (5.0, 5.0))
    magnet = coin.get_component(Magnet)
    magnet.target = Vector2(5.0, 5.0)
    before = GameManager.get().coin
    magnet.update(0.016)
    assert not coin.alive
    assert GameManager.get().coin == before + 1