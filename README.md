# jengine

A small 2D game engine on top of pygame. A game is a tree of objects. Each
frame the engine walks the tree three times: it reads input, then updates,
then draws.

## Install

```
pip install jengine
```

For the test suite:

```
pip install "jengine[test]"
```

## Building blocks

- `jengine.vector.Vector`: an immutable 2D vector. It supports `+` and `-`
  with another vector, and `*` and `/` either component-wise with another
  vector or with a number. The in-place forms return new vectors. It also
  has `magnitude()`, `normalize()` (the zero vector stays zero),
  `distance_to()` and `direction_to()`.
- `jengine.ids.generate_uuid()`: returns a random version-4 UUID string.
- `jengine.objects.Object`: a node in the scene tree. Each node has a
  generated `id`, a `name`, a `parent` and `children`. Look children up with
  `get_child(id)` or `get_child_by_name(name)`. `add_child`, `remove_child`
  and `delete_child` raise `ValueError` when the child is already present, is
  missing, or is the game root, and `TypeError` for `None`. Override
  `input()`, `update(dt)` and `output()` to give a node behaviour; the
  `run_input()`, `run_update(dt)` and `run_output()` methods call these and
  then recurse into the children. Call `queue_delete()` to have the game
  delete a node at the end of the current update.
- `jengine.entity.Entity`: an object with a `position` and a `velocity`.
  Setting `position` recomputes `global_position`, which is the parent
  entity's global position plus the local position, for the entity and every
  entity below it.
- `jengine.timer.Timer`: adds `dt` on each update while running. When the
  total reaches `timeout` it calls the function given to
  `set_callback(callback, data)` with `data`. With `restart` set it keeps
  running; otherwise it stops. Use `start()`, `stop()` and `is_running()`.
- `jengine.physics.Physics`: the shared registry of collision shapes.
  `check_collision(shape)` returns the ids of the other shapes it touches.
- `jengine.collision.CollisionShapeSquare`: an axis-aligned box of a given
  `size` that registers itself with `Physics` on creation and unregisters on
  `destroy()`. `in_layer` and `view_layer` are bit masks: a box only sees
  boxes whose `in_layer` shares a bit with its `view_layer`. On each update it
  calls `collision_end_handlers` for shapes it stopped touching, then
  `collision_start_handlers` for new ones, with the other shape's id.
  `collides_with_point(point)` tests a point strictly inside the box.
- `jengine.controls.Controls`: turns pygame quit, key, mouse button and mouse
  motion events into handler calls. Key handlers get pygame's key name (for
  example `"escape"`); mouse handlers get the cursor position as a `Vector`.
  `handle_event(event)` dispatches one event; `input()` drains the queue.
- `jengine.visuals.Visual` and `jengine.visuals.Square`: entities with an
  RGBA `color`; a `Square(width, height, position)` fills that rectangle.
- `jengine.renderer.Renderer`: the 800×600 window. `clear()`, `present()` and
  `set_window_title(title)`.
- `jengine.resources.Resources`: `load_font(name, data)` stores font bytes as
  an in-memory stream under `fonts[name]`.
- `jengine.game.Game`: the singleton root that runs the frame loop at
  `set_fps(fps)` frames per second (30 by default) until `stop()` is called.
  Closing the window stops it too.

## Example

```python
from jengine.controls import Controls
from jengine.game import Game
from jengine.timer import Timer
from jengine.vector import Vector
from jengine.visuals import Square

game = Game.get_instance()
game.init()
game.set_fps(60)

box = Square(40, 40, Vector(100, 100))
game.add_child(box)


def move_box(_data):
    box.position = box.position + Vector(2, 0)


mover = Timer(0.05)
mover.restart = True
mover.set_callback(move_box)
mover.start()
game.add_child(mover)


def on_key(key):
    if key == "escape":
        game.stop()


Controls.get_instance().key_press_handlers.append(on_key)

try:
    game.run()
finally:
    game.cleanup()
    Game.delete_instance()
```

Call `game.init()` before running or drawing a frame, and `game.cleanup()`
before the instance goes away.

## What it does not do

- Fonts can be loaded into `Resources`, but nothing draws text.
- The only collision shape is the axis-aligned box; there is no movement
  from `velocity` and no collision response, only start and end
  notifications.
- There is no command-line program; the package is used as a library.