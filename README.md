# wavesurvivor

A top-down arcade survival game built on `pygame`. You stand in a 10000 x 10000
world while zombies spawn out of view and walk towards you. Your character fires
automatically at the nearest zombie. Killed zombies drop experience orbs. Each
level-up, and each chest you walk over, opens a screen with three different
upgrade cards to choose from. Enemies spawn faster at level 3 and again at
level 8, and timed events can send in extra groups of zombies.

## Installing

```
pip install .
```

## Playing

```
wavesurvivor [--textures DIR] [--events DIR]
```

- `--textures DIR`: directory holding the image files (default `textures`).
- `--events DIR`: directory holding event files (default `Events/`).

Controls:

- **W A S D**: move.
- **Delete**: turn the debug overlay on or off. It draws hitboxes, the pickup
  radius and a line to the current target, and has a panel with buttons to level
  up, spawn an enemy, spawn a chest or bring up the upgrade cards.
- **Mouse**: choose START, OPTIONS or EXIT on the main menu, pick an upgrade
  card, and change the window size (640x480 or 1280x720) in the options menu.

Every image listed in `wavesurvivor.textures.TEXTURE_FILES` must exist in the
texture directory (for example `playerMoveAnimation.png`, `zombieTexture.png`,
`cardTexture_biggest.png`, `buttonTexture.png`); a missing one raises
`FileNotFoundError` at start.

## Upgrade cards

| Card         | Effect                                |
|--------------|---------------------------------------|
| Speed        | move speed x 1.05                     |
| Attack speed | time between shots x 0.95             |
| Health       | current health x 1.05                 |
| Pickup       | pickup radius x 1.05                  |
| Thorn aura   | adds a thorn aura spell to the player |
| Damage       | no effect                             |

Levelling up also raises maximum health by 20, shortens the time between shots
by 50 ms and adds a little move speed.

## Events

Event files are read from the events directory, in name order. Each file may hold
any number of blocks of this form:

```
EVENT horde
TIME=30
SPAWN=ZOMBIE:20, ZOMBIE:5
END
```

An event fires once the second within the current minute of play passes `TIME`,
and is then removed. `SPAWN` lists `TYPE:count` pairs; after each comma one
character (a space) is skipped. The only enemy type is `ZOMBIE`; other types are
ignored. A `TIME` that is not a number raises `ValueError`.

## Multiplayer

On start the game tries to connect over TCP to `127.0.0.1:8080`; if that fails
it logs the error and plays alone. When connected it sends `Hello server!`, then
its position every frame as `x,y`. It reads messages made of a 7-character
prefix, the player id, a space and `x,y`, and draws other players at those
positions. Messages that do not parse are ignored.

## Using the pieces

The game logic runs without a window:

- `wavesurvivor.events.EventParser` and `EventHandler` read event files.
- `wavesurvivor.network.parse_message` decodes position messages, and
  `ConnectionManager` keeps a connection and the latest `NetPlayer` per id.
- `wavesurvivor.game.GameHandler` runs the simulation one `update(InputState)`
  at a time; it takes an optional clock, `random.Random` and screen size.
- `wavesurvivor.characters`, `wavesurvivor.world`, `wavesurvivor.projectile`
  and `wavesurvivor.tools` hold the player, zombies, world and helpers.

## What it does not do

- There is no server; the game only talks to one that is already running.
- Spells are recorded on the player but do nothing in play, and the Damage
  card has no effect.
- The debug panel's Godmode box toggles but does not protect the player.
- There is no character selection screen and no saving of progress.

## Tests

```
pip install .[test]
pytest
```