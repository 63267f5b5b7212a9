import io

from kotawarga.cli import default_cities, main, render, run


def names(cities):
    return [city.name for city in cities]


def run_script(text):
    cities = default_cities()
    out = io.StringIO()
    result = run(cities, io.StringIO(text), out)
    return result, out.getvalue()


def test_default_cities():
    cities = default_cities()
    assert names(cities) == ["Bandung", "Jakarta", "Malang", "Cimahi", "Padalarang"]
    assert list(cities[0]) == ["zahwa"]
    assert list(cities[4]) == ["maul"]


def test_render_contains_every_city_and_menu():
    cities = default_cities()
    screen = render(cities)
    for city in cities:
        assert city.format() in screen
    assert "DATA KOTA & WARGA" in screen
    assert screen.endswith("Pilih menu: ")


def test_exit_prints_thanks():
    cities, output = run_script("0\n")
    assert "Terima kasih telah menggunakan program ini." in output
    assert names(cities) == names(default_cities())


def test_add_city():
    cities, output = run_script("2 Bogor\n0\n")
    assert names(cities)[-1] == "Bogor"
    assert cities[-1].is_empty()
    assert "Kota Bogor berhasil ditambahkan." in output


def test_delete_city():
    cities, output = run_script("1\nMalang\n0\n")
    assert "Malang" not in names(cities)
    assert len(cities) == 4
    assert "Kota Malang berhasil dihapus." in output


def test_delete_unknown_city_changes_nothing():
    cities, output = run_script("1 Nowhere 0")
    assert names(cities) == names(default_cities())
    assert "berhasil dihapus" not in output


def test_add_resident_goes_first():
    cities, output = run_script("4 Bandung ani 0")
    assert list(cities[0]) == ["ani", "zahwa"]
    assert "berhasil ditambahkan ke Kota Bandung" in output


def test_add_resident_unknown_city():
    cities, output = run_script("4 Nowhere 0")
    assert "tidak ditemukan" in output
    assert [list(city) for city in cities] == [list(c) for c in default_cities()]


def test_delete_resident():
    cities, output = run_script("3 suci Malang 0")
    assert cities[2].is_empty()
    assert "berhasil dihapus dari Kota Malang" in output


def test_invalid_menu_choice():
    cities, output = run_script("9\nabc\n0\n")
    assert output.count("Menu tidak valid.") == 2
    assert "Terima kasih" in output


def test_end_of_input_stops():
    cities, output = run_script("2 Bogor")
    assert names(cities)[-1] == "Bogor"
    assert "Terima kasih" not in output


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main() == 0
    captured = capsys.readouterr()
    assert "Terima kasih telah menggunakan program ini." in captured.out