# bubblebobble

Game logic for a Bubble Bobble style arcade game. It covers the high-score
file, menu selection, initials entry, level files, the scene stack and the
score and lives that carry over between levels. The package needs only the
standard library.

## Modules

- `bubblebobble.highscores` works with the high-score file. Each line of the
  file is `NAME,SCORE`, where the name is exactly three non-digit characters.
  - `PlayerScore(name, score)` is a single entry. `to_line()` returns the
    entry in its file form.
  - `parse_score_line(line)` returns a `PlayerScore`, or `None` when the line
    is not a valid entry.
  - `load_high_scores(path)` returns the valid entries in file order and
    skips any line that is not valid.
  - `write_high_score(path, initials, score)` adds an entry, then rewrites
    the file sorted by descending score. It raises `ValueError` when the
    initials are longer than three characters.
  - `name_in_list(path, name)` tells you whether the name appears in the
    file. `remove_high_score(path, name)` deletes every entry with that name.
  - `first_score(path)` returns the entry on the first line. If that line is
    not valid it returns an empty `PlayerScore()`.
  - `rank_label(rank)` gives `1ST`, `2ND`, `3RD`, `4TH` and so on.
  - `top_scores(path, limit=10)` returns up to `limit` `(label, entry)`
    pairs.

  The file must exist. Every reader raises `FileNotFoundError` if it does
  not.
- `bubblebobble.buttons` has two classes.
  - `Button(command, position)` runs `command()` when it is activated, but
    only while it is selected.
  - `ButtonHandler` selects the first button added. `select_next()` and
    `select_previous()` wrap around at both ends. `activate()` asks for the
    selected button to run, and that happens on the next `update()`. Adding
    the same button twice raises `ValueError`.
- `bubblebobble.initials` has `InitialsEntry`.
  - `advance_character(forward)` steps the current character through `.`
    and `A` to `Z`, wrapping at both ends.
  - `confirm_character()` moves on to the next character.
  - Once three characters are confirmed, the next `update()` calls the
    callbacks you registered with the entry.
  - `text()` returns the characters entered so far.
- `bubblebobble.achievements` has `Achievements`, with its achievements
  `Score500Points`, `WinOneGame` and `WinAHundredGames`.
  - `notify(score)` unlocks and prints `Score500Points` the first time the
    score reaches 500. None of the methods unlocks the other two.
  - `is_achieved(name)` reports whether an achievement is unlocked.
- `bubblebobble.fps` has `FpsCounter`. `tick(delta_time)` counts frames.
  About twice a second it returns a text such as `59.8 FPS`.
- `bubblebobble.cache_experiment` has `CacheExperiment`.
  - `run(nr_of_samples, func)` times `func(array, index)` over the whole
    array for each step size from 1 to 1024, doubling each time.
  - It returns the average time per step size in microseconds. With more
    than two samples, the fastest and the slowest sample are dropped before
    averaging.
- `bubblebobble.counters` has four classes.
  - `EnemyCounter` calls its callback when the last enemy dies. If `notify()`
    would take the count below zero, it raises `RuntimeError`.
  - `LivesDisplay` drops one life object on each `notify()`.
  - `HighScoreDisplay` keeps the best score it has seen. `from_file(path)`
    starts it from the first entry of the high-score file.
  - `Inventory` stores picked-up items with their positions.
    `last_added_item()` raises `LookupError` when the inventory is empty.
- `bubblebobble.scenes` has the enums `GameMode`, `CurrScene` and
  `SoundEvent`, the `SceneState` base class with its enter, exit, suspend and
  resume hooks, and `Game`.
  - `Game` is built from a mapping of `CurrScene` to scene factories, with an
    optional sound callback.
  - `start()` plays the title sound and enters the title screen.
  - `set_scene(scene)` exits every scene on the stack, top first, and enters
    the new one.
  - `push_scene(scene)` suspends the current scene and enters the new one on
    top of it.
  - `pop_scene()` exits the top scene and resumes the one below it.
  - `push_scene` raises `RuntimeError` on an empty stack. `pop_scene` raises
    `RuntimeError` when the stack holds fewer than two scenes. A scene with
    no factory raises `ValueError`.
- `bubblebobble.levels` reads the level file into `Tile` and `EnemySpawn`
  objects and returns them in a `LevelData`.
  - In the file, levels are separated by `-`.
  - Each level's grid starts at its row numbered `01`. Every row begins with
    a two-character prefix, and the grid runs until the first `:`.
  - In the grid, `p` is a platform, `w` is a wall and `f` is filler.
  - Enemy lines have the form `ZenChan: x, y` or `Maita: x, y`.
  - The functions are `extract_level_block`, `parse_stage`, `parse_enemies`
    and `load_level(path, level_number)`.
- `bubblebobble.progress` has two classes.
  - `PlayerInfo` holds the score and health that carry over between levels.
    `player_one(window_size)` and `player_two(window_size)` build the two
    players. `sync(score, lives)` never stores 0 lives. `reset()` restores a
    fresh start with 3 lives.
  - `LevelProgress.advance()` syncs the players and moves to the next level.
    After the last level, which is 3 by default, it calls the results
    callback and returns `True`.

## Examples

```python
from pathlib import Path
from bubblebobble.highscores import write_high_score, top_scores

path = Path("HighScores.txt")
path.touch()
write_high_score(path, "ABC", 1200)
write_high_score(path, "XYZ", 800)
for label, entry in top_scores(path):
    print(label, entry.score, entry.name)
# 1ST 1200 ABC
# 2ND 800 XYZ
```

```python
from bubblebobble.levels import extract_level_block, parse_stage, parse_enemies

text = "Level 1\n01wwww\n02p  p\n:\nZenChan: 40, 60\n-Level 2\n01ffff\n:\n"
block = extract_level_block(text, 1)
tiles = parse_stage(block)      # walls on row 0, platforms on row 1
enemies = parse_enemies(block)  # [EnemySpawn(kind=EnemyType.ZEN_CHAN, x=40.0, y=60.0)]
```

## What the package does not do

The package has no game window, no rendering, no input handling, no audio
playback and no physics or collision. It ships no command to start a game.
Scenes, sounds and on-screen text reach a host program through the callbacks
and factories described above, and that host has to drive the frames by
calling `update()` and `tick()`.

## Running the tests

```
pip install -e .[test]
pytest
```