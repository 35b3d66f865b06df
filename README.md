# Leap Up

Leap Up is a vertical jumping arcade game. You bounce from platform to
platform, and the world scrolls upward as you climb. Some platforms slide from
side to side. Fireballs fly across the gaps between platforms, and now and
then a shield power-up appears on a platform near the top of the screen.

## Installing

```
pip install .
```

## Playing

```
leapup
```

This opens the title menu in a 1000x1400 window. The menu fades in from black
while the music plays.

- **Start** begins a game. When that game ends, the program ends too.
- **Quit** closes the game.
- The **volume** button in the top-left corner pauses the music and resumes
  it. Its icon switches between the volume and mute images.

To skip the menu and play a single game in a 400x533 window:

```
leapup --game
```

In a game:

- The **Left** and **Right** arrow keys move the player.
- The player jumps by itself on landing on a platform. A landing counts only
  while the player is falling and non-transparent pixels of the two images
  touch.
- If you fall below the bottom of the screen, the game ends with
  "Game Over!".
- If a fireball hits you while you have no shield, the game ends with
  "Hit by fireball!".
- Touch a shield pickup to get a blue aura. The aura destroys the first
  fireball that touches it and is then gone. It wears off after 20 seconds
  anyway. A pickup that nobody takes disappears after 10 seconds.

### Assets

The menu reads these files from an `assets` directory in the working
directory: `bg.png`, `start.png`, `credits.png`, `quit.png`, `volume.png`,
`mute.png` and `music1.mp3`.

The game reads `plat.png`, `player.png`, `bg.png`, `fireball.png` and
`shield.png` from the working directory itself.

If an image or the music cannot be loaded, the command prints an error and
exits with status 1.

## What it does not do

The **Credits** button is drawn on the menu, but clicking it does nothing.
The game keeps no score and no high-score table.

## Using the pieces

The game rules run without a window, so you can drive them from your own code.

- `leapup.world.World.new(config, rng, player_mask, platform_mask, fireball_mask)`
  lays out the platforms and stands the player on the middle one.
  `World.step(left, right, now)` moves the game on by one frame. `now` is the
  number of seconds since the world was made. The method returns an
  `Outcome`: `RUNNING`, `FELL` or `HIT`. `World.player_bounds()` gives the
  player's rectangle.
- `leapup.world.GameConfig` holds the sizes, speeds and timings.
  `leapup.world.find_gaps` lists the heights at which a fireball fits between
  platforms.
- `leapup.entities` has `Fireball`, `Platform` and `Shield`.
- `leapup.collision` has `Rect`, `AlphaMask` and `pixel_perfect_collision`.
  The last one checks two alpha masks for overlapping opaque pixels inside a
  region.
- `leapup.app` has the window code: `run_menu`, `run_game` and `main`, plus
  the helpers `fade_alpha`, `load_mask`, `MenuLayout` and `VolumeToggle`.

## Running the tests

```
pip install .[test]
pytest
```