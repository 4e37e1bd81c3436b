import pytest

pygame = pytest.importorskip("pygame")

from main import KEY_COMMANDS, parse_args  # noqa: E402
from game.commands import Command  # noqa: E402


def test_default_arguments():
    args = parse_args([])
    assert (args.width, args.height) == (15, 15)
    assert args.radius == 3
    assert args.fog is True
    assert args.seed is None
    assert not args.animate


def test_all_arguments():
    args = parse_args(["21", "11", "--radius", "4.5", "--no-fog", "--seed", "3", "--animate"])
    assert (args.width, args.height) == (21, 11)
    assert args.radius == 4.5
    assert args.fog is False
    assert args.seed == 3
    assert args.animate


@pytest.mark.parametrize("value", ["1", "abc"])
def test_bad_dimensions_exit(value):
    with pytest.raises(SystemExit):
        parse_args([value, "15"])


def test_keys_cover_every_command():
    assert set(KEY_COMMANDS.values()) == set(Command)
    assert KEY_COMMANDS[pygame.K_r] == Command.RESTART
    assert KEY_COMMANDS[pygame.K_f] == Command.TOGGLE_FOG
