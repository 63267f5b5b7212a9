# kotawarga

A small terminal program for keeping a register of cities and the people
who live in them. Each city holds its residents in a singly linked list.

## Installing

```
pip install .
```

## Running

```
kotawarga
```

The program starts with five cities: Bandung, Jakarta, Malang, Cimahi and
Padalarang, each with one resident. Each time the menu is drawn, the
program shows every city with its residents, then offers these choices:

```
1. Delete Kota    remove a city and all of its residents
2. Entry Kota     add a new, empty city
3. Delete Warga   remove a resident from a city
4. Entry Warga    add a resident to the front of a city's list
0. Exit
```

Input is read one word at a time, so names cannot contain spaces. A choice
that is not one of the numbers above gives "Menu tidak valid." The program
stops on `0` or when the input runs out. When output goes to a terminal,
the screen is cleared before the menu is drawn again.

Deleting a city or a resident from a city that does not exist does nothing.
Adding a resident to a city that does not exist reports that the city was
not found.

## Using the list directly

`kotawarga.sll.City` is the linked list behind the program. Its elements are
`kotawarga.sll.Node` objects.

```python
from kotawarga.sll import City

city = City("Bandung")
city.push_front("zahwa")
city.push_back("rafi")
print(list(city))          # ['zahwa', 'rafi']
city.remove_resident("zahwa")
print(city.format())
```

`City` also offers `search`, `search_prev`, `contains_node`, `pop_front`,
`pop_back`, `insert_first`, `insert_after`, `insert_last`, `remove_first`,
`remove_last`, `remove_after`, `remove_value`, `clear` and `is_empty`.
`pop_front`, `pop_back`, `remove_first` and `remove_last` raise `IndexError`
on an empty city.

The menu can also be driven from code. `kotawarga.cli.run(cities, lines, out)`
reads words from `lines`, writes to `out` and returns the list of cities.
`default_cities()` gives the five starting cities, and `render(cities)` gives
the text of one menu screen.

```python
import io
from kotawarga.cli import default_cities, run

out = io.StringIO()
cities = run(default_cities(), ["2 Bogor", "0"], out)
print([city.name for city in cities])
```

## What it does not do

The register is kept only in memory. Nothing is saved when the program
exits, and every run starts again from the five default cities.

## Tests

```
pip install .[test]
pytest
```