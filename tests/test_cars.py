import pytest

from regcar.cars import (
    RECORD_SIZE,
    Car,
    CarExistsError,
    CarFile,
    CarNotFoundError,
)


@pytest.fixture
def car_file(tmp_path):
    with CarFile(tmp_path / "cars.dat") as cars:
        yield cars


def sample(plate="AAA-0001", **kwargs):
    fields = {"brand": "Brand", "model": "Model", "color": "Blue"}
    fields.update(kwargs)
    return Car(plate, **fields)


def test_record_size_matches_layout():
    assert RECORD_SIZE == 60
    assert len(sample().pack()) == RECORD_SIZE


def test_pack_unpack_round_trip():
    car = sample("ABC-0123", brand="Make", model="Kind", color="Red")
    assert Car.unpack(car.pack()) == car


def test_inactive_round_trip():
    car = sample(active=False)
    assert Car.unpack(car.pack()).active is False


def test_pack_layout_starts_with_plate_and_ends_with_status():
    data = sample("ABC-0123").pack()
    assert data.startswith(b"ABC-0123\0")
    assert data[-4:] == b"\x01\x00\x00\x00"


def test_pack_truncates_long_fields():
    car = sample(brand="B" * 20)
    assert Car.unpack(car.pack()).brand == "B" * 14


def test_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        Car.unpack(b"\0" * (RECORD_SIZE - 1))


def test_new_file_is_empty(car_file):
    assert len(car_file) == 0
    assert car_file.is_empty()
    assert list(car_file.records()) == []


def test_add_and_get(car_file):
    index = car_file.add(sample("AAA-0001"))
    assert index == 0
    assert car_file.get("AAA-0001") == sample("AAA-0001")
    assert car_file.find("AAA-0001") == 0
    assert not car_file.is_empty()


def test_add_sets_active(car_file):
    car_file.add(sample("AAA-0001", active=False))
    assert car_file.get("AAA-0001").active is True


def test_add_duplicate_raises(car_file):
    car_file.add(sample("AAA-0001"))
    with pytest.raises(CarExistsError):
        car_file.add(sample("AAA-0001", brand="Other"))
    assert len(car_file) == 1


def test_get_missing_raises(car_file):
    with pytest.raises(CarNotFoundError):
        car_file.get("ZZZ-9999")


def test_find_is_case_sensitive(car_file):
    car_file.add(sample("AAA-0001"))
    assert car_file.find("aaa-0001") is None


def test_update_fields(car_file):
    car_file.add(sample("AAA-0001"))
    updated = car_file.update("AAA-0001", brand="NewBrand", color="Green")
    assert updated.brand == "NewBrand"
    assert updated.color == "Green"
    assert updated.model == "Model"
    assert car_file.get("AAA-0001") == updated


def test_update_unknown_field_raises(car_file):
    car_file.add(sample("AAA-0001"))
    with pytest.raises(TypeError):
        car_file.update("AAA-0001", plate="BBB-0002")


def test_update_missing_raises(car_file):
    with pytest.raises(CarNotFoundError):
        car_file.update("AAA-0001", brand="X")


def test_delete_marks_inactive(car_file):
    car_file.add(sample("AAA-0001"))
    removed = car_file.delete("AAA-0001")
    assert removed.plate == "AAA-0001"
    assert len(car_file) == 1
    assert car_file.read(0).active is False
    assert car_file.is_empty()
    with pytest.raises(CarNotFoundError):
        car_file.get("AAA-0001")


def test_deleted_plate_can_be_added_again(car_file):
    car_file.add(sample("AAA-0001"))
    car_file.delete("AAA-0001")
    assert car_file.add(sample("AAA-0001", brand="Again")) == 1
    assert car_file.get("AAA-0001").brand == "Again"


def test_active_skips_deleted(car_file):
    for plate in ("AAA-0001", "BBB-0002", "CCC-0003"):
        car_file.add(sample(plate))
    car_file.delete("BBB-0002")
    assert [car.plate for car in car_file.active()] == ["AAA-0001", "CCC-0003"]


def test_compact_drops_deleted(car_file):
    for plate in ("AAA-0001", "BBB-0002", "CCC-0003"):
        car_file.add(sample(plate))
    car_file.delete("AAA-0001")
    assert car_file.compact() == 1
    assert len(car_file) == 2
    assert [car.plate for car in car_file.records()] == ["BBB-0002", "CCC-0003"]
    assert car_file.find("CCC-0003") == 1


def test_compact_leaves_no_temp_files(tmp_path):
    with CarFile(tmp_path / "cars.dat") as cars:
        cars.add(sample())
        cars.compact()
    assert [p.name for p in tmp_path.iterdir()] == ["cars.dat"]


def test_read_and_write_out_of_range(car_file):
    with pytest.raises(IndexError):
        car_file.read(0)
    with pytest.raises(IndexError):
        car_file.write(0, sample())


def test_write_overwrites_record(car_file):
    car_file.append(sample("AAA-0001"))
    car_file.write(0, sample("BBB-0002"))
    assert [car.plate for car in car_file.records()] == ["BBB-0002"]


def test_records_persist_across_reopen(tmp_path):
    path = tmp_path / "cars.dat"
    with CarFile(path) as cars:
        cars.add(sample("AAA-0001"))
        cars.add(sample("BBB-0002"))
    with CarFile(path) as cars:
        assert [car.plate for car in cars.records()] == ["AAA-0001", "BBB-0002"]
    assert path.stat().st_size == 2 * RECORD_SIZE


def test_closed_file_raises(tmp_path):
    cars = CarFile(tmp_path / "cars.dat")
    with pytest.raises(ValueError):
        len(cars)
    cars.open()
    cars.close()
    with pytest.raises(ValueError):
        cars.find("AAA-0001")