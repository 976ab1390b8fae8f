# minigin

minigin is a small 2D game engine built around game objects and components. It
draws with pygame. It provides the following:

- **Game objects and components** (`minigin.game_object`, `minigin.components`).
  A `GameObject` holds components, and you add, look up or remove them by type
  with `add_component`, `get_component`, `has_component` and
  `remove_component`. A removed component is only marked at first. It is
  dropped in `late_update`. Every object has its own `TransformComponent`.
  `set_parent(parent, keep_world_position)` attaches one object to another.
  The child then follows the parent's position and rotation. A parent that
  would create a cycle is ignored.
- **Transforms** (`minigin.transform`). `TransformComponent` stores a local
  position and a rotation about the z axis in degrees. It combines them with
  the parents' transforms into a cached `world_matrix` and `world_position`.
- **Scenes** (`minigin.scene`). A `Scene` holds game objects and updates and
  renders them. Objects marked for destruction are removed in `late_update`.
  `SceneManager.instance()` creates the scenes and drives all of them.
- **Ready-made components** (`minigin.text`, `minigin.movement`):
  - `TextureComponent` draws a texture.
  - `TextComponent` draws a line of text. Its setters can be chained.
  - `FPSComponent` writes the average frame rate into the object's
    `TextComponent` once a second, formatted like `60.0FPS`.
  - `MovementComponent` moves its object at `speed` units per second.
  - `RotationComponent` spins its object at `rotation_speed` degrees per
    second.
  - `UIComponent` is a base class for components that only implement
    `render_ui`.
- **Frame timing** (`minigin.gametime`). `GameTime` measures the time between
  frames. `delta_time` is given in seconds.
- **Input through commands** (`minigin.input_manager`, `minigin.controller`,
  `minigin.commands`). You bind `Command` objects to pygame key codes or to a
  gamepad's `ControllerButton` with `InputManager`. An `InputState` of `DOWN`,
  `UP` or `PRESSED` picks when a binding fires:
  - `DOWN` fires when the input goes down.
  - `UP` fires when it goes up.
  - `PRESSED` fires every frame while it is held.

  `MoveVertical` and `MoveHorizontal` move an object that has a
  `MovementComponent` in a `Direction`. `process_input` reads pygame's events
  and keyboard state. You can also pass it events and held keys directly.
- **Resources** (`minigin.resources`). `ResourceManager` loads textures
  (`Texture2D`) and fonts (`Font`) relative to a data directory. It caches them
  by file name, and fonts by file name and size. `unload_unused_resources`
  forgets the entries that nothing else still refers to.
- **Rendering** (`minigin.renderer`). `Renderer` first runs the scenes'
  `render_ui` pass. It then clears the window to `background_color`, renders
  the scenes and flips the display.
- **A cache benchmark** (`minigin.cache_benchmark`). It times strided writes
  over large buffers of ints and of records that look like game objects, for
  step sizes from 1 to 1024.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the demos

Run the following from a directory that contains a `Data/` folder with the
assets, or whose parent directory does:

```
minigin [rotation|commands|tron|cache] [--data DIR]
```

The default demo is `commands`. Each demo shows the background, the logo, a
title and a frame-rate counter, and adds the following:

- `commands` (also available as `tron`) shows two tanks. The red tank moves
  with W, A, S and D. The blue tank moves with the first gamepad's
  directional pad.
- `rotation` shows a red tank circling a pivot point. A blue tank is parented
  to the red one and circles with it.
- `cache` adds a `CacheBenchmarkUI` object to the scene.

`--data` sets the asset directory explicitly.

To run the cache benchmarks in the terminal, use one of these commands:

```
minigin-cache-ints [--samples N] [--elements N]
minigin-cache-objects [--samples N] [--elements N]
```

- `minigin-cache-ints` doubles every step-th int in the buffer.
- `minigin-cache-objects` doubles the ID and the transform of every step-th
  object, where each object refers to a transform stored elsewhere.

`--samples` defaults to 12 and must be at least 3. `--elements` defaults to
2^26. Each command prints one line for every step size. The line holds the
mean time in milliseconds, leaving out the fastest and the slowest sample.

## Using the engine

```python
from minigin.engine import Minigin
from minigin.scene import SceneManager
from minigin.game_object import GameObject
from minigin.text import TextureComponent, FPSComponent, TextComponent


def load():
    scene = SceneManager.instance().create_scene()

    background = GameObject()
    background.add_component(TextureComponent).set_texture("background.png")
    scene.add(background)

    counter = GameObject()
    counter.add_component(TextComponent).set_font("Lingua.otf", 15).set_text("FPS")
    counter.add_component(FPSComponent)
    counter.transform.set_local_position((50, 20, 1))
    scene.add(counter)


with Minigin("Data/") as engine:
    engine.run(load)
```

`Minigin` opens a 1024×576 window. `Minigin.run` calls your load function once
and then runs frames until the window is closed. Each frame does the
following:

1. Update the frame clock (`GameTime`).
2. Process input.
3. Update and late-update every scene.
4. Render.
5. Sleep for whatever remains of a 16 ms frame.

## What it does not do

The engine has no immediate-mode interface toolkit. `render_ui` is called every
frame, but nothing draws widgets on screen. In particular,
`CacheBenchmarkUI.render_ui` only computes `PlotLine` data (labels and scaled
points) for the benchmarks that have results, and returns it. The `cache` demo
therefore shows no buttons and no plots. To run its benchmarks, call
`run_int_benchmark`, `run_object_benchmark` and `run_object_alt_benchmark` on
the component, or use the terminal commands above.