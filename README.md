# stockleague

Two line-oriented command interpreters. Both read commands from standard
input, one per line, and write results to standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Logistics: products and orders

```
stockleague-logistics < commands.txt
```

Each line starts with a one-letter command. Where a command takes
arguments, they follow as a single word (no spaces) whose fields are
separated by `:`. Missing numeric fields count as 0.

| Command | Arguments | Effect |
|---------|-----------|--------|
| `a` | `description:price:weight:stock` | add a new product, prints `Novo produto <id>.` |
| `q` | `product:quantity` | add stock to a product |
| `N` | `client` (optional) | create a new order, prints `Nova encomenda <id>.` |
| `A` | `order:product:quantity` | move stock of a product into an order |
| `r` | `product:quantity` | remove stock from a product |
| `R` | `order:product` | take a product out of an order, returning it to stock |
| `C` | `order` | print an order's total cost |
| `p` | `product:price` | change a product's price |
| `E` | `order:product` | print a product's description and quantity in an order |
| `m` | `product` | print the first order holding the most units of a product |
| `l` | | list every product by ascending price (ties in id order) |
| `L` | `order` | list an order's products by description |
| `V` | `order` | print an order's client |
| `x` | | stop reading commands |

An order may weigh at most 200. Products and orders are numbered from 0 in
the order they were created. When a command cannot be carried out, its
error message is printed in place of its output. Unknown commands and empty
lines are ignored.

The same operations are available as a library through
`stockleague.logistics.Warehouse`; failures raise
`stockleague.logistics.LogisticsError`. `stockleague.logistics.run` takes
an iterable of command lines and yields the output lines.

```python
from stockleague.logistics import Warehouse

warehouse = Warehouse()
pen = warehouse.add_product("pen", 2, 1, 10)
order = warehouse.new_order("client")
warehouse.add_to_order(order, pen, 3)
print(warehouse.order_cost(order))  # 6
```

## League: teams and games

```
stockleague-league < commands.txt
```

Each line is a one-letter command and a space, followed by arguments
separated by `:`. Every output line starts with the number of the input
line that produced it, counting from 1.

| Command | Arguments | Effect |
|---------|-----------|--------|
| `A` | `team` | add a team |
| `a` | `game:team1:team2:score1:score2` | add a game; the winner gains a victory |
| `l` | | list games in the order they were added |
| `P` | `team` | print a team and its number of victories |
| `p` | `game` | print a game |
| `r` | `game` | remove a game, taking back its winner's victory |
| `s` | `game:score1:score2` | change a game's score, adjusting victories |
| `g` | | print the most victories and the teams holding it, alphabetically |
| `x` | | stop reading commands |

Failures (`Equipa existente.`, `Equipa inexistente.`, `Jogo existente.`,
`Jogo inexistente.`) are printed after the line number. Unknown commands
produce no output. A score that is not an integer raises `ValueError`.

As a library, use `stockleague.league.League`; failures raise
`stockleague.league.LeagueError`. `stockleague.league_cli.execute` runs a
single command line against a `League`, and `stockleague.league_cli.run`
runs a whole sequence of lines against a fresh one.

```python
from stockleague.league import League

league = League()
league.add_team("Lions")
league.add_team("Tigers")
league.add_game("final", "Lions", "Tigers", 2, 1)
print(league.best_teams())  # (1, ['Lions'])
```

`stockleague.hashing.string_hash` maps a name to a bucket number between 0
and 418; it is a standalone helper and is not used by the interpreters.

## What it does not do

Neither interpreter keeps anything between runs: all products, orders,
teams and games live in memory for one run and are gone when input ends or
`x` is read. There is no file or database storage and no way to load or
save state.