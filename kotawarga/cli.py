"""Interactive menu for managing cities and their residents."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List

from kotawarga.sll import City

RULE = "=================================\n"

_INITIAL = [
    ("Bandung", "zahwa"),
    ("Jakarta", "faridha"),
    ("Malang", "suci"),
    ("Cimahi", "hilmi"),
    ("Padalarang", "maul"),
]


class _EndOfInput(Exception):
    """Raised when the input runs out."""


def default_cities() -> List[City]:
    """Return the starting cities, each with one resident."""
    cities = []
    for name, resident in _INITIAL:
        city = City(name)
        city.push_front(resident)
        cities.append(city)
    return cities


def render(cities) -> str:
    """Return the screen showing every city and the menu."""
    parts = [
        "\n" + RULE,
        "        DATA KOTA & WARGA        \n",
        RULE,
        *(city.format() for city in cities),
        RULE,
        "             M E N U            \n",
        RULE,
        "1. Delete Kota\n",
        "2. Entry Kota\n",
        "3. Delete Warga\n",
        "4. Entry Warga\n",
        "0. Exit\n",
        "Pilih menu: ",
    ]
    return "".join(parts)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _find(cities, name):
    return next((city for city in cities if city.name == name), None)


def _parse_choice(raw):
    try:
        return int(raw)
    except ValueError:
        return None


def _clear_screen(out) -> None:
    isatty = getattr(out, "isatty", None)
    if isatty is not None and isatty():
        out.write("\033[2J\033[H")


def _delete_city(cities, read, out) -> None:
    out.write("Masukkan nama kota yang ingin dihapus: ")
    name = read()
    city = _find(cities, name)
    if city is not None:
        city.clear()
        cities.remove(city)
        out.write(f"Kota {name} berhasil dihapus.\n")


def _add_city(cities, read, out) -> None:
    out.write("Masukkan nama kota yang ingin ditambahkan: ")
    name = read()
    cities.append(City(name))
    out.write(f"Kota {name} berhasil ditambahkan.\n")


def _delete_resident(cities, read, out) -> None:
    out.write("Masukkan nama warga yang ingin dihapus: ")
    resident = read()
    out.write("Masukkan nama kota tempat tinggal warga: ")
    city_name = read()
    city = _find(cities, city_name)
    if city is not None:
        city.remove_resident(resident)
        out.write(f"Warga {resident} berhasil dihapus dari Kota {city_name}.\n")


def _add_resident(cities, read, out) -> None:
    out.write("Masukkan nama kota tempat tinggal warga yang ingin ditambahkan: ")
    city_name = read()
    city = _find(cities, city_name)
    if city is None:
        if cities:
            out.write(f"Kota {city_name} tidak ditemukan.\n")
        return
    out.write(f"Masukkan nama warga yang ingin ditambahkan ke Kota {city_name}: ")
    resident = read()
    city.push_front(resident)
    out.write(f"Warga {resident} berhasil ditambahkan ke Kota {city_name}.\n")


_ACTIONS = {
    1: _delete_city,
    2: _add_city,
    3: _delete_resident,
    4: _add_resident,
}


def run(cities, lines, out):
    """Drive the menu from whitespace-separated input tokens until exit or end of input.

    Returns the (modified) list of cities.
    """
    tokens = _tokens(lines)

    def read() -> str:
        out.flush()
        try:
            return next(tokens)
        except StopIteration:
            raise _EndOfInput from None

    try:
        while True:
            _clear_screen(out)
            out.write(render(cities))
            choice = _parse_choice(read())
            out.write(RULE)
            if choice == 0:
                out.write("Terima kasih telah menggunakan program ini.\n")
                break
            action = _ACTIONS.get(choice)
            if action is None:
                out.write("Menu tidak valid.\n")
            else:
                action(cities, read, out)
    except _EndOfInput:
        pass
    out.flush()
    return cities


def main(argv=None) -> int:
    """Run the interactive menu on standard input and output."""
    run(default_cities(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())