import io

from regcar import cars_cli
from regcar.cars_cli import CarRegistryApp, main
from regcar.registry import CarRegistry

PLATE = "AAA-0000"
OTHER = "ZZZ-9999"


def scripted(lines):
    it = iter(lines)

    def read():
        try:
            return next(it) + "\n"
        except StopIteration:
            raise EOFError

    return read


def run_app(path, lines):
    out = []
    CarRegistryApp(path, scripted(lines), out.append).run()
    return "".join(out)


def register_lines(plate, brand="Fiat", model="Uno", color="Red"):
    return ["1", plate, brand, model, color]


def stored(path):
    with CarRegistry(path) as registry:
        return {car.plate: car for car in registry}


def test_register_and_list(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + ["5", "0"])
    assert cars_cli.CAR_SAVED in text
    assert f"Plate: {PLATE}" in text
    assert "Brand: Fiat" in text
    car = stored(path)[PLATE]
    assert (car.brand, car.model, car.color) == ("Fiat", "Uno", "Red")


def test_plate_is_upper_cased_and_retried(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, ["1", "bad", "aaa-0000", "Fiat", "Uno", "Red", "0"])
    assert "Invalid format" in text
    assert list(stored(path)) == [PLATE]


def test_duplicate_plate_rejected(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + register_lines(PLATE)[:2] + ["0"])
    assert cars_cli.CAR_EXISTS in text
    assert len(stored(path)) == 1


def test_empty_registry_refuses_queries(tmp_path):
    text = run_app(tmp_path / "cars.dat", ["2", "3", "4", "5", "0"])
    assert text.count(cars_cli.NO_CARS) == 4


def test_show_found_and_missing(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + ["2", OTHER, "2", PLATE, "0"])
    assert cars_cli.CAR_NOT_FOUND in text
    assert cars_cli.CAR_FOUND in text
    assert "Model: Uno" in text


def test_change_brand_only(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + ["3", PLATE, "1", "Ford", "0"])
    assert cars_cli.BRAND_CHANGED in text
    car = stored(path)[PLATE]
    assert (car.brand, car.model, car.color) == ("Ford", "Uno", "Red")


def test_change_all_after_invalid_choice(tmp_path):
    path = tmp_path / "cars.dat"
    lines = register_lines(PLATE) + ["3", PLATE, "9", "4", "Ford", "Ka", "Blue", "0"]
    text = run_app(path, lines)
    assert cars_cli.INVALID_CHANGE_OPTION in text
    car = stored(path)[PLATE]
    assert (car.brand, car.model, car.color) == ("Ford", "Ka", "Blue")


def test_change_cancelled(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + ["3", PLATE, "0", "0"])
    assert cars_cli.CANCELLED in text
    assert stored(path)[PLATE].brand == "Fiat"


def test_remove_confirmed(tmp_path):
    path = tmp_path / "cars.dat"
    lines = register_lines(PLATE) + ["4", PLATE, cars_cli.CONFIRM_WORD, "0"]
    text = run_app(path, lines)
    assert cars_cli.CAR_REMOVED in text
    assert stored(path) == {}
    assert path.stat().st_size == 0


def test_remove_not_confirmed(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + ["4", PLATE, "no", "0"])
    assert cars_cli.CANCELLED in text
    assert PLATE in stored(path)


def test_invalid_menu_options(tmp_path):
    text = run_app(tmp_path / "cars.dat", ["7", "abc", "0"])
    assert text.count(cars_cli.INVALID_OPTION) == 2
    assert text.endswith(cars_cli.GOODBYE)


def test_end_of_input_keeps_data(tmp_path):
    path = tmp_path / "cars.dat"
    text = run_app(path, register_lines(PLATE) + register_lines(OTHER))
    assert text.endswith(cars_cli.GOODBYE)
    assert sorted(stored(path)) == [PLATE, OTHER]


def test_data_survives_restart(tmp_path):
    path = tmp_path / "cars.dat"
    run_app(path, register_lines(PLATE) + ["0"])
    text = run_app(path, ["2", PLATE, "0"])
    assert "Colour: Red" in text


def test_main_uses_stdin_and_stdout(tmp_path, monkeypatch, capsys):
    path = tmp_path / "cars.dat"
    script = "\n".join(register_lines(PLATE) + ["0"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([str(path)]) == 0
    assert cars_cli.CAR_SAVED in capsys.readouterr().out
    assert PLATE in stored(path)