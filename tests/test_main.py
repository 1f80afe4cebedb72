"""
Tests for the command-line interface.
"""

import json
import shutil
from pathlib import Path

import matplotlib
import pytest

matplotlib.use('Agg')

from hailstorm.main import main, run_solver


CONFIG_DIR = Path(__file__).parent.parent / "configs"


@pytest.fixture
def input_file(tmp_path, example_text):
    path = tmp_path / "hail.txt"
    path.write_text(example_text)
    return path


@pytest.fixture
def config_dir(tmp_path):
    """Copy of the shipped configs with the example target area."""
    target = tmp_path / "configs"
    shutil.copytree(CONFIG_DIR, target)
    (target / "area.yaml").write_text(
        "target_area:\n  x_min: 7\n  y_min: 7\n  x_max: 27\n  y_max: 27\n")
    return target


class TestRunSolver:
    """Tests for run_solver."""

    @pytest.mark.parametrize("algorithm", ["sweep_line", "brute_force"])
    def test_counts_example(self, input_file, config_dir, algorithm):
        count = run_solver(str(input_file), algorithm, str(config_dir), visualize=False)
        assert count == 2

    def test_area_override(self, input_file):
        count = run_solver(str(input_file), config_dir=str(CONFIG_DIR),
                           area_bounds=[7, 7, 27, 27], check_order=True, visualize=False)
        assert count == 2

    def test_unknown_algorithm(self, input_file, config_dir, capsys):
        assert run_solver(str(input_file), 'quadtree', str(config_dir), visualize=False) is None
        assert "Unknown algorithm" in capsys.readouterr().out

    def test_save_outputs(self, input_file, config_dir, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        run_solver(str(input_file), 'sweep_line', str(config_dir), visualize=False, save=True)

        results = tmp_path / "outputs" / "sweep_line" / "crossings.json"
        assert json.loads(results.read_text())['intersections'] == 2
        assert (tmp_path / "outputs" / "sweep_line" / "crossings.png").exists()


class TestMain:
    """Tests for argument parsing and exit status."""

    def test_success(self, input_file, config_dir, capsys):
        status = main([str(input_file), '--config-dir', str(config_dir), '--no-viz'])
        assert status == 0
        assert "2 crossings inside the target area" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, config_dir, capsys):
        status = main([str(tmp_path / "missing.txt"), '-c', str(config_dir), '--no-viz'])
        assert status == 1
        assert "Trajectory file not found" in capsys.readouterr().out

    def test_bad_line(self, tmp_path, config_dir, capsys):
        bad = tmp_path / "bad.txt"
        bad.write_text("1, 2, 3 @ 4, 5\n")
        status = main([str(bad), '-c', str(config_dir), '--no-viz'])
        assert status == 1
        assert "three" in capsys.readouterr().out

    def test_malformed_config(self, input_file, config_dir, capsys):
        (config_dir / "sweep_line.yaml").write_text("algorithm: [unclosed\n")
        status = main([str(input_file), '-c', str(config_dir), '--no-viz'])
        assert status == 1
        assert "Error parsing YAML file" in capsys.readouterr().out

    def test_rejects_unknown_algorithm_choice(self, input_file):
        with pytest.raises(SystemExit):
            main([str(input_file), '--algorithm', 'quadtree'])
