import pytest

from ninetools.bitcoin import BitcoinExchange, check_date, check_value, main

DATABASE = "date,exchange_rate\n2011-01-03,0.5\n2011-01-09,1\n\n2012-03-01,2\n"


@pytest.fixture
def exchange(tmp_path):
    database = tmp_path / "data.csv"
    database.write_text(DATABASE)
    ex = BitcoinExchange()
    ex.load_database(database)
    return ex


def test_check_date_accepts_valid():
    assert check_date("2011-01-03") == "2011-01-03"


@pytest.mark.parametrize(
    "date",
    ["2011-02-29", "2100-02-29", "2008-05-05", "2009-01-01", "2011-13-01", "2011-00-10", "2011-04-31", "2011-04-00"],
)
def test_check_date_rejects_invalid(date):
    with pytest.raises(ValueError, match="Error: Invalid Date!"):
        check_date(date)


def test_check_date_first_allowed_day():
    assert check_date("2009-01-02") == "2009-01-02"


def test_check_date_rejects_format():
    with pytest.raises(ValueError, match="Invalid Date Format"):
        check_date("2011/01/03")


def test_check_value_accepts_bounds():
    assert check_value("1000") == 1000.0
    assert check_value("0") == 0.0
    assert check_value("1.5") == 1.5


@pytest.mark.parametrize("value", ["-1", "1.2.3", "abc", "1e3", "1 "])
def test_check_value_rejects_non_numbers(value):
    with pytest.raises(ValueError, match="not a valid number"):
        check_value(value)


def test_check_value_rejects_large():
    with pytest.raises(ValueError, match="too large a number"):
        check_value("1000.5")


def test_evaluate_exact_date(exchange):
    assert exchange.evaluate_line("2011-01-09 | 3") == "2011-01-09 => 3 => 3"


def test_evaluate_uses_closest_earlier_date(exchange):
    assert exchange.evaluate_line("2011-01-05 | 1") == "2011-01-05 => 1 => 0.5"
    assert exchange.evaluate_line("2011-02-01 | 7") == exchange.evaluate_line("2011-01-09 | 7").replace(
        "2011-01-09", "2011-02-01"
    )


def test_evaluate_after_last_date_uses_last_rate(exchange):
    late = exchange.evaluate_line("2020-06-01 | 5")
    same = exchange.evaluate_line("2012-03-01 | 5")
    assert late.split(" => ")[1:] == same.split(" => ")[1:]


def test_evaluate_before_first_date(exchange):
    with pytest.raises(ValueError, match="no exchange rate"):
        exchange.evaluate_line("2010-01-01 | 5")


@pytest.mark.parametrize("line", ["2011-01-03 |", "2011-01-03|3", "2011-01-03 , 3", "2011-01-03 3"])
def test_evaluate_bad_input(exchange, line):
    with pytest.raises(ValueError, match="Error: bad input => "):
        exchange.evaluate_line(line)


def test_search_prices_collects_results_and_errors(exchange, tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("date | value\n2011-01-09 | 3\n\n2011-01-09 | -1\n2011-01-09 | 2000\nbad\n")
    assert exchange.search_prices(source) == [
        "2011-01-09 => 3 => 3",
        "Error: Provided value is not a valid number!",
        "Error: too large a number!",
        "Error: bad input => bad",
    ]


def test_search_prices_missing_file(exchange, tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(RuntimeError, match="Could not open file"):
        exchange.search_prices(missing)


def test_empty_filenames():
    ex = BitcoinExchange()
    with pytest.raises(ValueError, match="CSV Filename not given"):
        ex.load_database("")
    with pytest.raises(ValueError, match="Input Filename not given"):
        ex.search_prices("")


def test_main_requires_one_argument(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Provide an argument <input_file>!\n"


def test_main_prints_results(tmp_path, monkeypatch, capsys):
    (tmp_path / "data.csv").write_text(DATABASE)
    (tmp_path / "input.txt").write_text("date | value\n2011-01-09 | 4\n")
    monkeypatch.chdir(tmp_path)
    assert main(["input.txt"]) == 0
    assert capsys.readouterr().out == "2011-01-09 => 4 => 4\n"


def test_main_reports_missing_database(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["input.txt"])
    assert "Error: Could not open file data.csv" in capsys.readouterr().err