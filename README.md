# gomato

A Pomodoro timer for the terminal. Keep a list of tasks, pick one, and
work through focus sessions, short breaks and long breaks. Tasks, timers
and settings are saved between runs.

## Installation

```
pip install .
```

## Usage

Start the program:

```
gomato
```

It opens full screen and shows your task list. If there are no tasks yet,
a welcome task is created. At start-up every task's timer is set to a
fresh pomodoro of the configured length.

### Task list

| Key              | Action                          |
|------------------|---------------------------------|
| `enter`          | choose a task and start timing  |
| `a`              | add a task                      |
| `x`, `backspace` | delete the selected task        |
| `s`              | open the settings               |
| `T`              | toggle the title bar and filter |
| `S`              | toggle the status bar           |
| `P`              | toggle pagination               |
| `H`              | toggle the help line            |
| `up`/`k`, `down`/`j` | move the cursor             |
| `left`/`right`, `pgup`/`pgdown` | change page      |
| `home`/`g`, `end`/`G` | first or last task         |
| `/`              | filter tasks by title           |
| `?`              | show or hide the full help      |
| `q`, `esc`, `ctrl+c` | quit                        |

While typing a filter, `enter` applies it and `esc` clears it; `esc`
also clears an applied filter.

### Adding a task

The form has a title field, a description field (up to 156 characters
each) and a `Create` button. Move with `tab`/`ctrl+n` and
`shift+tab`/`ctrl+p`; `enter` moves to the next field and, on the button,
creates the task. `esc` or `ctrl+c` cancels. New tasks start with a
25-minute timer.

### Timer

| Key        | Action                  |
|------------|-------------------------|
| `space`    | start or pause          |
| `r`        | reset to a new pomodoro |
| `q`, `esc` | back to the task list   |

When a work session ends, a short break follows. After the configured
number of work sessions (the cycle), a long break follows instead and the
count starts again. When a break ends, the next work session starts on
its own. The timer's state is written to the task file as it runs.

### Settings

The Timer tab sets the length of a pomodoro, a short break and a long
break in minutes, the number of sessions in a cycle, and how the
remaining time is shown: as large ASCII-art digits or as plain `MM:SS`.
Move between fields with `tab`, `shift+tab`, `up` and `down`. In the
display selector use `left`/`right` or `1`/`2`; elsewhere `left`/`right`
switch tabs. Press `enter` to save, `q`/`esc` to go back without saving,
or `ctrl+c` to quit. On leaving the settings screen, the pomodoro length
is applied to the active timer and to every task's timer.

## Files

Everything is kept in `~/.gomato`:

- `setting.json`: timer lengths, cycle and display mode
- `tasks.json`: tasks and the state of each task's timer
- `gomato.log`: a timestamped log of timer ticks and cycle changes

## Library use

The pieces can be used without the terminal interface, for example:

```python
from gomato.ansi import time_to_ansi_art
from gomato.config import Settings
from gomato.timer import Session

print(time_to_ansi_art("25:00"))
print(Settings().to_dict())

session = Session()
session.time_model.timer_remaining = 3
session.toggle()
outcome = session.tick()
print(outcome.message, outcome.schedule_next)
```

`gomato.app.App` drives all screens through `handle_key`, `handle_tick`
and `view`, so it can be run headless as well. `Session.tick` writes to
the log only after `gomato.applog.init_logging` has been called.

## Limitations

The Appearance and Notifications tabs of the settings screen show
placeholder text only; there are no desktop or sound notifications. The
`ctrl+r` key in the settings cycles a cursor mode that does not change
how the fields are drawn.