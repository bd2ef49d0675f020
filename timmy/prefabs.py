"""Factories for the player, enemies and pickups."""

from __future__ import annotations

from pygame.math import Vector2

from .collider import CircleCollider, Collider
from .controllers import EnemyAI, PlayerController
from .gameobject import GameObject, Layer
from .health import Health
from .lifetime import Lifetime
from .movement import Magnet, Velocity
from .render import SpriteRenderer, TextRenderer
from .resources import SPRITE_SHEET
from .weapons import FireWeapon
from .world import World

_RED = (230, 41, 55, 255)
_BLACK = (0, 0, 0, 255)


def create_player(world: World, position) -> GameObject:
    """The player: moves with WASD, shoots and pulls items towards itself."""
    player = world.create_object("player1")
    player.position = Vector2(position)
    player.add_component(CircleCollider(8.0))
    player.add_component(PlayerController(100.0))

    sprite = player.add_component(SpriteRenderer())
    sprite.add_animation("Idle", SPRITE_SHEET, 128, 32, 16, 32, 2, 0.5, True)
    sprite.add_animation("Walk", SPRITE_SHEET, 192, 32, 16, 32, 4, 0.15, True)
    sprite.anchor_ratio = Vector2(0.5, 0.75)

    player.add_component(FireWeapon(1.0, 0.1, 300.0, 2.0, 2.0, 200.0))

    magnet_collider = player.add_component(CircleCollider(50.0))
    magnet_collider.is_trigger = True

    def attract(other: Collider) -> None:
        if other.game_object.layer == Layer.ITEM:
            magnet = other.game_object.get_component(Magnet)
            if magnet is not None:
                magnet.target = player

    magnet_collider.on_trigger_enter.add_listener(attract)
    return player


def create_knight(world: World, position, target: GameObject) -> GameObject:
    """An enemy that chases ``target`` and drops a coin when it dies."""
    knight = world.create_object("knight")
    knight.layer = Layer.ENEMY
    knight.position = Vector2(position)

    knight.add_component(Velocity((0.0, 0.0), 15.0))
    knight.add_component(CircleCollider(8.0))
    knight.add_component(EnemyAI(target, 35.0))

    health = knight.add_component(Health(3.0))

    def drop_coin() -> None:
        create_coin(world, knight.position)

    def show_damage(damage: float) -> None:
        label = world.create_object("text")
        label.position = Vector2(knight.position)
        label.add_component(
            TextRenderer(str(int(damage)), _RED, 20, 1.0, True, True, _BLACK, 2, True)
        )
        label.add_component(Velocity((0.0, -100.0), 3.0))
        label.add_component(Lifetime(1.0))

    health.on_death = drop_coin
    health.on_damage = show_damage

    sprite = knight.add_component(SpriteRenderer())
    sprite.add_animation("Idle", SPRITE_SHEET, 128, 64, 16, 32, 2, 0.5, True)
    sprite.add_animation("Walk", SPRITE_SHEET, 192, 64, 16, 32, 4, 0.15, True)
    sprite.anchor_ratio = Vector2(0.5, 0.75)

    return knight


def create_coin(world: World, position) -> GameObject:
    """A coin that is collected once a magnet brings it to its target."""
    coin = world.create_object("coin")
    coin.layer = Layer.ITEM
    coin.position = Vector2(position)
    collider = coin.add_component(CircleCollider(8.0))
    collider.is_trigger = True

    magnet = coin.add_component(Magnet())

    def collect() -> None:
        from .game import GameManager

        coin.destroy()
        GameManager.get().add_coin(1)

    magnet.on_collect = collect

    sprite = coin.add_component(SpriteRenderer())
    sprite.add_animation("Idle", SPRITE_SHEET, 288, 272, 8, 8, 4, 0.1, True)

    return coin