from datetime import datetime

import pytest

from rtime.core.formatter import ru_format
from rtime.pdio.loader import NamesLoader
from rtime.tables.exceptions import InvalidNamesList
from rtime.tables.tables import DEFAULT_TABLES, NameTables, TokenCategory

MARCH_1 = datetime(2023, 3, 1)


def _write(tmp_path, text):
    path = tmp_path / "names.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_replaces_listed_tables(tmp_path):
    path = _write(tmp_path, (
        "# short month names with dots\n"
        "month,Янв.,Фев.,Мар.,Апр.,Май,Июн.,Июл.,Авг.,Сен.,Окт.,Ноя.,Дек.\n"
        "\n"
        "Weekday_Lower,пон,вто,сре,чет,пят,суб,вос\n"
    ))
    tables = NamesLoader(path).load()
    assert ru_format(MARCH_1, "Янв, пн", tables) == "Мар., сре"
    # untouched tables keep the built-in names
    assert ru_format(MARCH_1, "Января ПН", tables) == "Марта СР"


def test_load_without_tables_leaves_defaults(tmp_path):
    path = _write(tmp_path, "weekday,1,2,3,4,5,6,7\n")
    NamesLoader(path).load()
    assert DEFAULT_TABLES.names(TokenCategory.WEEKDAY)[0] == "ПН"


def test_load_into_given_tables(tmp_path):
    path = _write(tmp_path, "long_weekday,a,b,c,d,e,f,g\n")
    tables = NameTables()
    assert NamesLoader(path).load(tables) is tables
    assert tables.names(TokenCategory.LONG_WEEKDAY)[2] == "c"


def test_unknown_table_key(tmp_path):
    path = _write(tmp_path, "months,1,2,3\n")
    with pytest.raises(ValueError, match="unknown name table"):
        NamesLoader(path).load()


def test_bad_row_replaces_nothing(tmp_path):
    path = _write(tmp_path, (
        "weekday,1,2,3,4,5,6,7\n"
        "month,only,three,names\n"
    ))
    tables = NameTables()
    with pytest.raises(InvalidNamesList):
        NamesLoader(path).load(tables)
    assert tables.names(TokenCategory.WEEKDAY)[0] == "ПН"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        NamesLoader(tmp_path / "absent.csv").load()


def test_cell_whitespace_is_stripped(tmp_path):
    path = _write(tmp_path, "weekday, Пнд , Втр, Срд ,Чтв,Птн,Сбт,Вск\n")
    tables = NamesLoader(path).load()
    assert tables.names(TokenCategory.WEEKDAY)[:3] == ("Пнд", "Втр", "Срд")
