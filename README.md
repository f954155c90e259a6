# minigin

The core of a small component-based 2D game engine on top of pygame. It
provides game objects with components and parent/child positions, scenes and
a scene manager, a queued event system, multicast delegates, a pluggable
logger, and drawing of textures, sprite-sheet animations and text.

## Installation

```
pip install .
```

## Overview

- `minigin.game_object.GameObject`: a node in the scene tree. It holds
  components and children. `add_child` and `set_parent` move objects in the
  tree, and by default keep their world position. `world_position()` gives
  the local position plus the positions of all ancestors. `destroy()` marks
  the object and its children as destroyed. An object holds at most one
  component of each exact type; adding a second one raises
  `DuplicateComponentError`. `get_component` and `has_component` find a
  component by its type.
- `minigin.component.Component`: the base class for behaviour. Override
  `update`, `fixed_update`, `render` and `begin_play`, or attach handlers to
  the `on_update`, `on_fixed_update`, `on_render` and `on_begin_play`
  delegates. Components run from the highest priority to the lowest. A
  component has only one owner; giving it a second raises
  `ComponentOwnerError`.
- `minigin.transform.Vec3` and `minigin.transform.Transform`: an immutable
  vector, and the local and world positions of an object.
- `minigin.scene.Scene` and `minigin.scene.SceneManager`: a scene holds the
  root objects, ordered by priority. `create_scene` makes a scene and also
  makes it the current one. `set_current_scene` switches to another scene and
  calls its `begin_play`. `update(delta_time)` stores the frame time in
  `delta_time` and updates the objects in the current scene that are not
  destroyed.
- `minigin.events`: `EventQueue` is a growing ring buffer. It sends each event
  to every `EventListener`, oldest event first. `EventManager` keeps one queue
  for each event type. It processes all queues when `handle_events()` runs
  after `mark_dirty()`.
- `minigin.delegate.MulticastDelegate`: calls every handler you have added,
  with the same arguments each time.
- `minigin.logger.Logger`: a service locator for a `LoggingSystem`. It starts
  with a `NullLoggingSystem`, which drops messages. Passing `None` to
  `register_service` restores it.
- `minigin.renderer.Renderer`: draws onto a pygame surface that you give it
  with `init(surface)`. Its methods are `render_texture`, `render_region`,
  `draw_square`, `fill_square` and `fill_rect`. `render()` clears the surface
  to `background_color` and draws the current scene. If the surface is the
  display surface, `render()` also flips the display.
- `minigin.texture.Texture2D` and `minigin.texture.Font`: a pygame surface,
  and a TrueType font. `Font(None, size)` uses pygame's built-in font.
- `minigin.resources.ResourceManager`: loads textures and fonts. The file name
  is put directly after the data path given to `init`, with nothing added
  between them.
- `minigin.render_component.RenderComponent`: draws a texture, or the
  animation chosen by `state`, at twice the owner's world position.
- `minigin.animation.AnimationComponent`: steps through the frames of one row
  of a sprite sheet. The `AnimationType` modes are `LOOP`, `ONLY_ONCE`,
  `START_AT_NON_ZERO` and `ONLY_ONCE_END_AT_LAST`. The one-shot modes run
  after `play()`.
- `minigin.text_component.TextComponent`: renders text (`set_text`) or a
  rectangle of solid colour (`set_color_rect`) into the texture of a render
  component.

## Example

```python
from minigin.component import Component
from minigin.game_object import GameObject
from minigin.scene import SceneManager


class Mover(Component):
    def update(self):
        pos = self.owner.world_position()
        self.owner.set_position(pos.x + 1, pos.y)


manager = SceneManager.instance()
scene = manager.create_scene("Level")

player = GameObject(0)
player.add_component(Mover(0))
scene.add(player)

manager.update(1 / 60)
print(player.world_position())  # Vec3(x=1.0, y=0.0, z=0.0)
```

## What it does not do

- It does not read input. There is no keyboard or game-controller handling,
  and no way to bind actions to keys or buttons.
- It does not play sound.
- It does not open a window or run a game loop. Create the pygame display
  yourself, pass its surface to `Renderer.init`, and call
  `SceneManager.update` and `Renderer.render` from your own loop.
- It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```