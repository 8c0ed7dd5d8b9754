# tinyinvaders

tinyinvaders is a small arcade shooter. It opens a 1024×768 window with a
formation of ten by seven enemy ships that sway from side to side. Your ship
sits near the bottom of the screen and fires lasers upwards. From time to time
an enemy drops a beam towards you, and one hit destroys your ship.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
tinyinvaders
tinyinvaders --assets path/to/game
```

`--assets` names the directory that holds the `Assets` folder. The default is
the current directory. The game loads these images from `Assets`:

| File | Used for |
|------|----------|
| `Title.png` | title screen |
| `bg.png` | stage background |
| `tiny_ship5.png` | player ship |
| `tiny_ship10.png`, `tiny_ship18.png`, `tiny_ship16.png`, `tiny_ship9.png` | enemy ships, from the lowest rank up to the boss row |
| `laserBlue03 1.png` | player laser |
| `ebeams.png` | enemy beam |
| `explosion.png` | explosion, a 3×3 sheet of 48-pixel frames |

An image that cannot be loaded is not drawn, and the game keeps running.

Controls:

- **Enter**: leave the title screen and start playing
- **Left / Right**: move the ship
- **Space**: fire. The ship has five lasers that can be in flight at once, and at least half a second must pass between shots.
- **Escape**: end the game

A laser that hits an enemy destroys it, and an explosion appears where the
enemy was. When a beam hits your ship, the ship explodes, and one second
later the game ends.

## What it does not do

The game keeps no score and has no lives. It has no results screen and no way
to play another round. When the game ends, whether from your ship being
destroyed, from Escape, or from closing the window, the window closes and the
command exits.

## Using it as a library

The game logic does not need a display. `tinyinvaders.app.Game` runs with any
renderer. `tinyinvaders.graphics.RecordingRenderer` draws nothing and records
each request it receives in `images`, `draws`, `clears` and `presents`. With
it you can run the game one frame at a time:

```python
from tinyinvaders.app import Game
from tinyinvaders.graphics import RecordingRenderer
from tinyinvaders.input import Key

renderer = RecordingRenderer()
game = Game(renderer)
game.step({Key.RETURN}, 1 / 60)   # leave the title screen
game.step(set(), 1 / 60)
game.step({Key.SPACE}, 1 / 60)    # fire
print(len(renderer.draws))        # draw calls made in the last frame
```

`Game.step(pressed, dt)` takes the set of keys held in this frame and the
elapsed time in seconds. It returns `False` once the game is over.

The other modules:

- `tinyinvaders.geometry`: `Point`, `Rect`, the window size, and the collision tests `check_hit` (edges that touch count as a hit) and `intersect_rect` (the overlap must have a positive area)
- `tinyinvaders.graphics`: `RecordingRenderer` and `PygameRenderer`
- `tinyinvaders.world`: `World`, which queues, updates, draws and removes objects, and the `GameObject` base class
- `tinyinvaders.input`: `Key` and `KeyState`, which reports held keys, presses, releases and hold counts
- `tinyinvaders.player`, `tinyinvaders.enemy`, `tinyinvaders.bullet`, `tinyinvaders.enemy_beam`, `tinyinvaders.effect`: the objects in play
- `tinyinvaders.stage`: `Stage`, which builds the player and the formation and handles hits from lasers
- `tinyinvaders.scenes`: `TitleScene` and `GameScene`

## Running the tests

```
pip install .[test]
pytest
```