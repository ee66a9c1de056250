"""
Game Registry and Launcher Tests

Tests for game auto-discovery and the dev_game command line.
"""

import pytest

import dev_game
from models import Resolution
from games.registry import GameRegistry, get_registry


class TestGameRegistry:

    def test_discovers_archery(self):
        registry = get_registry()
        assert registry.list_games() == ['archery']
        info = registry.get_game_info('Archery')
        assert info.name == "Archery"
        assert info.module_path == 'games.Archery'
        assert info.has_config

    def test_arguments_include_base(self):
        names = [a['name'] for a in get_registry().get_game_arguments('archery')]
        assert '--variant' in names
        assert '--seed' in names

    def test_unknown_game(self):
        registry = get_registry()
        assert registry.get_game_info('pong') is None
        assert registry.get_game_arguments('pong') == []
        with pytest.raises(ValueError, match="Unknown game"):
            registry.create_game('pong', 640, 480)
        with pytest.raises(ValueError):
            registry.create_input_manager('pong')

    def test_create_game(self):
        game = get_registry().create_game('archery', 1280, 720, variant='aim', seed=1)
        assert game.session.config.name == 'aim'
        assert game.session.config.play_area.width == 1280

    def test_skips_broken_games(self, tmp_path):
        broken = tmp_path / 'Broken'
        broken.mkdir()
        (broken / 'game_mode.py').write_text("raise RuntimeError('boom')\n")
        registry = GameRegistry(games_dir=tmp_path, package='no_such_package')
        assert registry.list_games() == []

    def test_empty_directory(self, tmp_path):
        assert GameRegistry(games_dir=tmp_path / 'missing').list_games() == []


class TestLauncher:

    @pytest.mark.parametrize("value,expected", [
        ("1280x720", Resolution(width=1280, height=720)),
        ("1920X1080", Resolution(width=1920, height=1080)),
    ])
    def test_parse_resolution(self, value, expected):
        assert dev_game.parse_resolution(value) == expected

    @pytest.mark.parametrize("value", ["1280", "0x720", "axb"])
    def test_parse_resolution_invalid(self, value):
        with pytest.raises(ValueError):
            dev_game.parse_resolution(value)

    def test_list(self, capsys):
        assert dev_game.main(['--list']) == 0
        out = capsys.readouterr().out
        assert "archery" in out
        assert "--variant" in out

    def test_no_game(self, capsys):
        assert dev_game.main([]) == 1

    def test_bad_resolution(self, capsys):
        assert dev_game.main(['archery', '--resolution', 'big']) == 1
        assert "Invalid resolution" in capsys.readouterr().out

    def test_game_arguments_parsed(self):
        parser = dev_game.build_parser(get_registry(), 'archery')
        args = parser.parse_args(['archery', '--variant', 'aim', '--duration', '30'])
        assert args.variant == 'aim'
        assert args.duration == 30
        assert args.preset_file is None
