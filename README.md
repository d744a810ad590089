# scopetab

scopetab provides a symbol table of the kind a compiler front end keeps. It is a stack of nested scopes, and each scope is a hash table with chained buckets. The package also includes:

- a command-driven driver that compares the SDBM, BKDR and RS hashes by their collision ratio;
- a small A* solver for the sliding N-puzzle.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `scopetab.hashing` | The hash functions (see below). |
| `scopetab.symbol` | `SymbolInfo` and `OutputStyle` (see below). |
| `scopetab.scope` | `ScopeTable` (see below). |
| `scopetab.table` | `SymbolTable` (see below). |
| `scopetab.report` | `split_command`, `process`, `report_generator` and `main`, which drives a table from a command file. |
| `scopetab.npuzzle` | `Board`, `Heuristic`, `Solution`, `parse_board`, `solve`, `format_solution` and `main`. |

### `scopetab.hashing`

This module provides `sdbm_hash`, `sdbm_raw`, `bkdr_hash`, `rs_hash` and `bucket_index`.

`bucket_index(text, num_buckets, hash_name)` picks a hash by name:

- `"BKDR"` selects BKDR;
- `"RS"` selects RS;
- any other name selects SDBM.

### `scopetab.symbol`

`SymbolInfo(name, kind)` holds extra entries:

- for a `FUNCTION`, the return type and then the parameter types;
- for a `STRUCT` or `UNION`, the members.

`OutputStyle` chooses between two output styles, `PLAIN` and `COMPACT`.

### `scopetab.scope`

`ScopeTable` is one scope. It has the methods `insert`, `look_up`, `delete`, `dump` and `close`.

### `scopetab.table`

`SymbolTable` is the stack of scopes. Lookups search from the innermost scope outwards. The outermost scope cannot be exited.

## Library use

```python
import sys

from scopetab.symbol import OutputStyle, SymbolInfo
from scopetab.table import SymbolTable

with SymbolTable(7, sys.stdout, "SDBM", OutputStyle.PLAIN) as table:
    table.insert_name("x", "INT")
    table.enter_scope()
    table.insert(SymbolInfo("y", "FLOAT"))
    table.look_up("x")
    table.print_all()
    table.exit_scope()
    print(table.collision_ratio())
```

### Output styles

The two styles differ in scope ids, what is reported, how SDBM reduces its value, and how plain symbols and dumps are written.

| | `OutputStyle.PLAIN` (default) | `OutputStyle.COMPACT` |
| --- | --- | --- |
| Scope ids | `1`, `1.1`, `1.2`, … | `1`, `2`, `3`, … |
| Reported | Deletions and failed lookups only | Also scope creation and removal, insertions and successful lookups |
| SDBM reduction | At the end only | Modulo the bucket count after every character |
| Plain symbols | `< name : type >` | `<name,type>` |
| Dumps | Non-empty buckets only | Every bucket |

Functions, structs and unions are written the same way in both styles.

## Command driver

```
scopetab-report INPUT OUTPUT [HASH_NAME] [--report FILE] [--style {plain,compact}]
```

The first non-blank line of `INPUT` gives the number of buckets. Every following line is one command:

| Command | Effect |
| --- | --- |
| `I name type [...]` | Insert a symbol. `FUNCTION` takes a return type and then the parameter types. `STRUCT` and `UNION` take pairs of member type and member name. |
| `L name` | Look up a symbol through every open scope. |
| `D name` | Delete a symbol from the current scope. |
| `P C` | Print the current scope. |
| `P A` | Print all scopes. |
| `S` | Enter a new scope. |
| `E` | Exit the current scope. |
| `Q` | Quit. The session also ends at the end of the input. |

The session runs once for each of SDBM, BKDR and RS. Each command line is echoed to `OUTPUT` with its number, followed by the table's messages.

After each run, one line of the form `NAME     ratio` goes to the report file (`report.txt` unless `--report` is given). The ratio is the sum of the collisions of all scopes divided by the number of scopes created.

`HASH_NAME` is accepted but ignored, because every hash is always reported.

Malformed insertions and unknown commands are reported on standard output.

## N-puzzle solver

```
scopetab-npuzzle [INPUT] [--heuristic {hamming,manhattan}]
```

The solver reads a board from `INPUT`, which defaults to `input.txt`. The input gives the dimension, then the tiles row by row, with `0` as the blank.

It prints:

- the minimum number of moves;
- the explored and expanded board counts;
- every board along the solution.

If the board cannot be solved, it prints `Unsolvable puzzle` instead. The default heuristic is Manhattan distance.

```python
from scopetab.npuzzle import Heuristic, format_solution, parse_board, solve

board = parse_board("3\n1 2 3\n4 5 6\n7 0 8\n")
print(format_solution(solve(board, Heuristic.HAMMING)))
```

## What it does not do

scopetab stores and reports symbols but does not read program source. There is no tokenizer or parser that fills the table from code. Symbols come only from library calls or from the command file of `scopetab-report`.