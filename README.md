# battlecity

A small multiplayer grid shooter. Players move across a randomly generated
city map, shoot bullets, break walls and set off bombs. The package has two
halves:

- `battlecity.server`: the game model (`gamemap`, `tile`, `player`,
  `bullet`, `entity`, `powerup`, `weapon`, `user`, `characters`,
  `movement`, `timer`), a levelled `logger`, an SQLite account store
  (`database.GameDatabase`) and an HTTP router (`routing.Router`).
- `battlecity.client`: the client-side model that talks to the server: an
  HTTP client (`http.HttpClient`), the board that shows the map and sends
  moves (`board.Board`), the upgrade shop (`shop.Shop`), the start menu
  (`menu.StartMenu`), character selection (`characters.CharacterSelection`),
  simple signals and clickable cells (`events`) and image locations
  (`resources`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Serving the game

There is no command that starts the server; it is started from Python:

```python
import random

from battlecity.server.database import GameDatabase
from battlecity.server.gamemap import GameMap
from battlecity.server.routing import Router

database = GameDatabase("users.sqlite")
database.initialize()
game_map = GameMap(random.Random())
game_map.place_bombs_on_walls()
Router(database, game_map).serve(port=18080)
```

`GameMap` is between 45 and 50 columns wide and 25 to 30 rows high, with all
four corners free. `Router.serve` answers on several threads until
interrupted. The routes are:

| Method | Path                          | Purpose                                   |
|--------|-------------------------------|-------------------------------------------|
| GET    | `/`                           | Greeting                                  |
| POST   | `/register`                   | Create an account (`username`, `password`)|
| POST   | `/login`                      | Check credentials                         |
| GET    | `/map`                        | Width, height and the tile/entity layout  |
| POST   | `/move`                       | Move a player (`playerID`, `direction`)   |
| POST   | `/upgrade/bullet-wait-time`   | Shorten the weapon's wait time            |
| POST   | `/upgrade/bullet-speed`       | Double the bullet speed once              |
| GET    | `/get/total-score?userId=N`   | The user's total score                    |
| GET    | `/get/specialMoney?userId=N`  | The user's special money                  |

`/login` always answers 200 with a `userId` of 1 when the credentials match
and 0 when they do not. Directions are `Up`, `Down`, `Left` and `Right`. Each
square of the map layout holds a `tile` (0 free, 1 destructible wall, 2
indestructible wall), an `entity` (`nothing`, a player id, `bullet`, `bomb`
or a power-up name) and a `direction`.

A registration request body looks like:

```json
{"username": "alice", "password": "password"}
```

`Router.handle(method, target, body)` answers a request without opening a
socket and returns a `Response` with `status`, `body` and `text`:

```python
response = router.handle("GET", "/")
response.status   # 200
response.text     # "Welcome to Battle City!"
```

## Using the game model directly

```python
import random

from battlecity.server.gamemap import GameMap

game_map = GameMap(random.Random(7))
print(game_map)               # one letter per square: F, D, I, P or B
print(game_map.tile((0, 0)))  # corners are always free
```

## Using the client model

`Board`, `Shop`, `StartMenu` and `CharacterSelection` hold the state of each
screen and report what happens through `events.Signal` objects. `Board` and
`Shop` reach the server through an `HttpClient`, by default at
`http://localhost:18080`:

```python
from battlecity.client.board import Board

board = Board()
board.notice.connect(lambda title, text: print(title, text))
board.on_login_success("1")   # fetches /map
board.key_pressed("D")        # asks the server to move player 1 right
```

## What this package does not do

- It has no command-line entry points; neither the server nor the client is
  started by a command.
- It has no login or registration forms on the client side and no
  application that ties the client screens together; the client modules are
  models to be driven from code.
- It draws nothing: there is no graphical interface, only the styles and
  image locations each cell would show.