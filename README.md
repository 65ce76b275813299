# doomdelve

Rules and bookkeeping for a classic terminal dungeon crawler. The package
covers dice rolls, rings, potions, the hero's pack, game options, the
decoding of terminal key sequences into movement commands, and the
high-score board with its tombstone.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `doomdelve.misc`: `Dice` (seedable, with `rnd` and `roll`), `sign`, `spread`,
  `vowelstr`, `add_str` (keeps strength between 3 and 31), `choose_str`,
  `rnd_thing` and `level_for_experience`. It also holds the object symbols,
  such as `POTION`, `SCROLL` and `AMULET`.
- `doomdelve.rings`: `RingKind`. `ring_eat` gives the food a ring uses in one
  turn. `ring_num` gives the bracketed bonus shown after a known ring, such
  as `" [+2]"`.
- `doomdelve.potions`: `Potion`. `potion_action` returns a `PotionAction` for
  the potions that set a timed condition. `is_magic` tells whether an object
  radiates magic.
- `doomdelve.pack`: `Pack`, `Item` and `PackFullError`.
  - `Pack.add` keeps like objects together and merges heaps. It raises
    `PackFullError` when the pack has no room.
  - `Pack.leave` takes an object out of the pack.
  - `Pack.pack_char` hands out pack letters.
  - `Pack.inventory` lists objects, optionally of one kind.
  - `Pack.find` looks an object up by its letter.
- `doomdelve.options`: `Options`, `InventoryStyle`, `EditResult`, `parse_opts`
  and `strucpy`.
  - `Options.describe` gives one line per option.
  - `edit_bool`, `edit_inventory_style` and `edit_string` edit a single value
    from a sequence of keys.
- `doomdelve.keys`: `KeyDecoder`, `decode_key` and `ctrl`. These turn curses key
  codes and escape sequences into walk commands (`hjklyubn`) or run commands
  (their control codes).
- `doomdelve.scores`: `Scoreboard` and `ScoreEntry`, plus `killname`,
  `center`, `tombstone` and `death_monst`.
  - A `Scoreboard` can `insert`, `format`, `load` and `save`.
  - The board is stored as JSON and saved atomically.

## Examples

```python
from doomdelve.options import Options, parse_opts

opts = Options()
parse_opts(opts, "terse,nojump,name=Rodney,inven=slow")
print("\n".join(opts.describe()))
```

```python
from doomdelve.keys import decode_key, ctrl

assert decode_key(["\x1b", "[", "A"]) == ctrl("K")   # run up
```

```python
from doomdelve.scores import Scoreboard

board = Scoreboard()
board.insert(1200, "Rodney", 0, 7, "T", 1000)
print("\n".join(board.format({"T": "troll"})))
```

## What the package does not do

Several parts of a playable game are not included:

- It does not generate dungeon levels: there are no rooms, mazes, passages,
  traps or stairs.
- It has no monster generation and no movement rules.
- It has no terminal screen or main game loop.
- It installs no command to run.
- It does not handle user, home-directory, shell, password-prompt or signal
  setup.