# timmy

timmy is a small top-down survival arcade game. You walk around an endless
grid while a growing crowd of knights closes in on you. Your weapon fires
on its own at the nearest enemy in range. Each knight you kill drops a
coin. When you come close to a coin, it is pulled toward you and added to
your total.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
timmy
```

The game opens a 1600×900 window. It looks for its sprite sheet at
`../assets/source.png`, relative to the working directory. The game still
runs if the sheet is missing, but no sprites are drawn.

Controls:

| Key         | Action                                         |
|-------------|------------------------------------------------|
| W A S D     | move                                           |
| mouse wheel | zoom the camera (0.1× to 3×)                   |
| Tab         | point the camera at a random object            |
| R           | spawn 20 more knights around the player        |
| ← / →       | slow down / speed up the game (0.1× to 5×)     |
| Esc         | quit                                           |

The overlay shows the frame rate, your coin count and the number of
enemies still alive.

## Using the engine

The game is built on a small component system. You can use that system
without the game:

```python
from timmy.world import World
from timmy.collider import CircleCollider
from timmy.movement import Velocity

world = World()
ball = world.create_object("ball")
ball.add_component(CircleCollider(8.0))
ball.add_component(Velocity((100.0, 0.0), 2.0))

world.update(1 / 60)
world.resolve_collisions()
print(ball.position)
```

Modules:

- `timmy.timer.Timer` counts up toward a target duration, driven by frame time. It runs once or loops, and it reports `progress`, `running` and `completed_this_frame`.
- `timmy.event.Event` holds a set of listeners. `add_listener` returns an id, and you pass that id to `remove_listener` to take the listener off.
- `timmy.gameobject` has `GameObject`, `Component` and the `Layer` enum.
- `timmy.world.World` owns the game objects. Each frame it updates them and then removes the ones that were destroyed. It also separates overlapping circle and box colliders and fires trigger events.
- `timmy.collider` has `BoxCollider` and `CircleCollider`. These use mass, static and trigger settings to decide how much each side is pushed.
- `timmy.movement` has `Velocity`, a damped velocity, and `Magnet`, which pulls an object toward a target.
- `timmy.health`, `timmy.lifetime`, `timmy.particle` and `timmy.projectile` hold the gameplay components.
- `timmy.weapons` has the abstract `Weapon` and `FireWeapon`, which shoots automatically.
- `timmy.controllers` has `PlayerController`, which moves with WASD, and `EnemyAI`, which chases a target.
- `timmy.render` has `SpriteRenderer`, which plays animations from a sprite sheet, and `TextRenderer`, which draws outlined text that can fade out.
- `timmy.camera.CameraManager` is a camera that follows a target smoothly. It supports zoom and screen shake, and converts between world and screen coordinates.
- `timmy.resources.ResourceManager` caches the textures it has loaded.
- `timmy.prefabs` builds the player, knights and coins.
- `timmy.game` has `GameManager` and the `main` entry point.

## What it does not do

- There is no sound, and there is no menu, pause screen or game-over screen. The game runs until you close the window or press Esc.
- Nothing is saved between runs. Coins and enemies start over each time.
- Shockwaves from `GameManager.add_shock` are drawn as fading rings over the scene. They do not distort the picture. The game itself never triggers a shockwave.