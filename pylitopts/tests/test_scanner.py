import pytest

from pylitopts.scanner import ParseEvent, Scanner, scan
from pylitopts.table import OptionDescriptor, build_table
from pylitopts.types import EventType, OptionKind


TABLE = build_table(
    [
        OptionDescriptor(short="s", long="short"),
        OptionDescriptor(short="l", long="long"),
        OptionDescriptor(short="c", long="color", parameter_name="WHEN", kind=OptionKind.OPTIONAL_VALUE),
        OptionDescriptor(short="o", long="output", parameter_name="FILE", kind=OptionKind.REQUIRED_VALUE),
        OptionDescriptor(long="version"),
        OptionDescriptor(long="config", parameter_name="FILE", kind=OptionKind.REQUIRED_VALUE),
        OptionDescriptor(long="level", kind=OptionKind.OPTIONAL_VALUE),
    ]
)


def events(args, posix=False):
    result = []
    for e in scan(TABLE, args, posix):
        if e.type == EventType.UNKNOWN:
            result.append(("UNKNOWN", e.char))
        elif e.type == EventType.FREE:
            result.append(("FREE", e.value))
        elif e.type in (EventType.FLAG, EventType.MISSING_VALUE):
            result.append((e.type.name, e.name))
        else:
            result.append((e.type.name, e.name, e.value))
    return result


def test_only_free_arguments():
    args = ["a", "b c", "", "-", "x-y"]
    assert events(args) == [("FREE", b"a"), ("FREE", b"b c"), ("FREE", b""), ("FREE", b"-"), ("FREE", b"x-y")]


def test_single_flag():
    (event,) = list(scan(TABLE, ["-s"]))
    assert event.type == EventType.FLAG
    assert event.name == "s"
    assert event.real == "s"
    assert event.via_long is False
    assert event.spelling == "-s"
    assert event.option is TABLE.find_short("s")


def test_flag_cluster():
    assert events(["-sl"]) == [("FLAG", "s"), ("FLAG", "l")]
    assert events(["-lsl", "x"]) == [("FLAG", "l"), ("FLAG", "s"), ("FLAG", "l"), ("FREE", b"x")]


def test_required_value_following_token():
    assert events(["-o", "value", "x"]) == [("VALUE", "o", b"value"), ("FREE", b"x")]


def test_required_value_attached():
    assert events(["-ofile"]) == [("VALUE", "o", b"file")]


def test_required_value_takes_rest_of_cluster():
    assert events(["-slofile-sl"]) == [("FLAG", "s"), ("FLAG", "l"), ("VALUE", "o", b"file-sl")]


def test_required_value_missing():
    assert events(["-o"]) == [("MISSING_VALUE", "o")]
    assert events(["x", "-so"]) == [("FREE", b"x"), ("FLAG", "s"), ("MISSING_VALUE", "o")]


def test_required_value_consumes_option_like_token():
    assert events(["-o", "-s"]) == [("VALUE", "o", b"-s")]
    assert events(["--output", "--"]) == [("VALUE", "o", b"--")]


def test_optional_value_short():
    assert events(["-cred"]) == [("OPTIONAL_VALUE", "c", b"red")]
    assert events(["-c"]) == [("OPTIONAL_VALUE", "c", None)]
    assert events(["-c", "red"]) == [("OPTIONAL_VALUE", "c", None), ("FREE", b"red")]
    assert events(["-scalways"]) == [("FLAG", "s"), ("OPTIONAL_VALUE", "c", b"always")]


def test_optional_value_long():
    (event,) = list(scan(TABLE, ["--color=auto"]))
    assert event.type == EventType.OPTIONAL_VALUE
    assert event.name == "c"
    assert event.real == "color"
    assert event.spelling == "--color"
    assert event.get_value_optional() == b"auto"

    assert events(["--color"]) == [("OPTIONAL_VALUE", "c", None)]
    assert events(["--color", "auto"]) == [("OPTIONAL_VALUE", "c", None), ("FREE", b"auto")]
    assert events(["--level=3"]) == [("OPTIONAL_VALUE", "level", b"3")]


def test_long_value_split_at_first_equal_sign():
    assert events(["--output=a=b"]) == [("VALUE", "o", b"a=b")]
    assert events(["--output="]) == [("VALUE", "o", b"")]


def test_long_required_value():
    assert events(["--output", "x"]) == [("VALUE", "o", b"x")]
    assert events(["--config=c.py"]) == [("VALUE", "config", b"c.py")]


def test_long_required_value_missing():
    (event,) = list(scan(TABLE, ["--output"]))
    assert event.type == EventType.MISSING_VALUE
    assert event.name == "o"
    assert event.spelling == "--output"
    assert events(["--config"]) == [("MISSING_VALUE", "config")]


def test_long_flag_reports_short_name():
    (event,) = list(scan(TABLE, ["--short"]))
    assert event.type == EventType.FLAG
    assert event.name == "s"
    assert event.real == "short"
    assert event.via_long is True


def test_long_flag_drops_attached_value():
    (event,) = list(scan(TABLE, ["--short=x"]))
    assert event.type == EventType.FLAG
    assert event.name == "s"
    assert event.value is None
    assert events(["--version=1", "a"]) == [("FLAG", "version"), ("FREE", b"a")]


def test_long_only_flag():
    (event,) = list(scan(TABLE, ["--version"]))
    assert event.type == EventType.FLAG
    assert event.name == "version"
    assert event.spelling == "--version"


def test_terminator():
    args = ["-s", "--", "-l", "--color", "--", "x"]
    assert events(args) == [("FLAG", "s"), ("FREE", b"-l"), ("FREE", b"--color"), ("FREE", b"--"), ("FREE", b"x")]


def test_terminator_only():
    assert events(["--"]) == []


def test_unknown_long_option_is_free():
    assert events(["--bogus"]) == [("FREE", b"--bogus")]
    assert events(["--bogus=1", "-s"]) == [("FREE", b"--bogus=1"), ("FLAG", "s")]
    assert events(["--=x"]) == [("FREE", b"--=x")]


def test_unknown_short_in_cluster():
    assert events(["-sx", "-l"]) == [("FLAG", "s"), ("UNKNOWN", "x"), ("FLAG", "l")]
    # The rest of the token is dropped.
    assert events(["-sxl"]) == [("FLAG", "s"), ("UNKNOWN", "x")]


def test_unknown_leading_short_is_free():
    assert events(["-x"]) == [("FREE", b"-x")]
    assert events(["-xs"]) == [("FREE", b"-xs")]


def test_posix_mode_stops_at_first_free_argument():
    assert events(["-s", "foo", "-l"], posix=True) == [("FLAG", "s"), ("FREE", b"foo"), ("FREE", b"-l")]
    assert events(["-s", "foo", "-l"]) == [("FLAG", "s"), ("FREE", b"foo"), ("FLAG", "l")]


def test_posix_mode_unknown_options_end_option_processing():
    assert events(["--bogus", "-s"], posix=True) == [("FREE", b"--bogus"), ("FREE", b"-s")]
    assert events(["-x", "-s"], posix=True) == [("FREE", b"-x"), ("FREE", b"-s")]


def test_posix_mode_values_are_not_free_arguments():
    assert events(["-o", "file", "-s"], posix=True) == [("VALUE", "o", b"file"), ("FLAG", "s")]


def test_bytes_and_str_arguments():
    assert events([b"-s", b"free", b"--color=\xff"]) == [
        ("FLAG", "s"),
        ("FREE", b"free"),
        ("OPTIONAL_VALUE", "c", b"\xff"),
    ]
    assert events(["-s", "free"]) == events([b"-s", b"free"])


def test_non_ascii_cluster_character():
    assert events([b"-s\xff"]) == [("FLAG", "s"), ("UNKNOWN", "\xff")]


def test_cursor_state():
    scanner = Scanner(TABLE, ["-sl", "x"])
    assert scanner.posix is False
    next(scanner)
    assert scanner.position == 0
    assert scanner.sub_position == 2
    next(scanner)
    next(scanner)
    assert scanner.position == 2
    assert scanner.sub_position is None


def test_exhausted_scanner_stays_exhausted():
    scanner = scan(TABLE, ["-s"])
    assert next(scanner).name == "s"
    with pytest.raises(StopIteration):
        next(scanner)
    with pytest.raises(StopIteration):
        next(scanner)
    assert list(scanner) == []


def test_empty_arguments():
    assert list(scan(TABLE, [])) == []


def test_scanners_are_independent():
    first = scan(TABLE, ["-s", "a"])
    second = scan(TABLE, ["--", "-s"])
    assert next(first).type == EventType.FLAG
    assert next(second).type == EventType.FREE
    assert next(first).type == EventType.FREE


def test_get_value():
    (event,) = list(scan(TABLE, ["-ox"]))
    assert event.get_value() == b"x"
    with pytest.raises(ValueError):
        event.get_value_optional()
    (event,) = list(scan(TABLE, ["-s"]))
    with pytest.raises(ValueError):
        event.get_value()


def test_event_helpers():
    free = ParseEvent(EventType.FREE, value=b"x")
    assert free.token == b"x"
    assert free.spelling == ""
    assert not free.is_failure
    assert str(free) == "FREE(b'x')"
    unknown = ParseEvent(EventType.UNKNOWN, char="x")
    assert unknown.is_failure
    assert unknown.token is None
    assert str(unknown) == "UNKNOWN('x')"
