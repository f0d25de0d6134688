"""Tests for the command-line interface and report."""

import json

import pytest

from bank_queue.config import SimulationConfig
from bank_queue.scripts import run_simulation
from bank_queue.scripts.run_simulation import (
    confidence_interval,
    format_banner,
    format_report,
    main,
    run_replications,
)
from bank_queue.system import BankSimulation


def answers(*values):
    replies = iter(values)
    return lambda prompt: next(replies)


class TestReport:

    def test_report_with_statistics(self, scripted_simulation):
        report = format_report(scripted_simulation([0, 2, 2], minutes=5).simulate())
        assert "Total Customers Arrived: 3" in report
        assert "Total Customers Served:  3" in report
        assert "Customers Left in Queue: 0" in report
        assert "Mean (Average) Wait: 0.67 minutes" in report
        assert "Median Wait:         0.0 minutes" in report
        assert "Mode Wait:           0 minutes" in report
        assert "Standard Deviation:  0.94 minutes" in report
        assert "Longest Wait Time:   2 minutes" in report

    def test_report_without_customers(self):
        sim = BankSimulation(SimulationConfig(arrival_rate=1.0, num_tellers=1, minutes=5),
                             arrival_distribution=lambda: 0)
        report = format_report(sim.simulate())
        assert "No customers were served. Cannot generate wait-time statistics." in report
        assert "Mean (Average) Wait" not in report

    def test_banner(self):
        banner = format_banner(SimulationConfig(arrival_rate=1.25, num_tellers=3))
        assert "Starting 8-Hour (480 Minute) Simulation" in banner
        assert "(Lambda): 1.25" in banner
        assert "Number of Tellers: 3" in banner


class TestMain:

    def test_single_run(self, capsys):
        main(['--arrival-rate', '1.0', '--tellers', '2', '--seed', '4'])
        out = capsys.readouterr().out
        assert "FINAL SIMULATION REPORT" in out
        assert "Total Customers Arrived:" in out

    @pytest.mark.parametrize("argv", [
        ['--arrival-rate', '0', '--tellers', '1'],
        ['--arrival-rate', 'inf', '--tellers', '1'],
        ['--arrival-rate', '5000', '--tellers', '1'],
        ['--arrival-rate', '1.0', '--tellers', '0'],
        ['--arrival-rate', '1.0', '--tellers', '2', '-r', '0'],
    ])
    def test_invalid_parameters_exit_nonzero(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_interactive_prompts(self, capsys):
        main(['-i', '--seed', '1', '-t', '30'], input_fn=answers('0.5', '2'))
        out = capsys.readouterr().out
        assert "Welcome to the Bank Queue Simulator" in out
        assert "Starting 0.5-Hour (30 Minute) Simulation" in out

    def test_interactive_bad_answer(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['-i'], input_fn=answers('lots'))
        assert exc.value.code == 1

    def test_end_of_input_at_prompt(self, capsys):
        def closed(prompt):
            raise EOFError

        with pytest.raises(SystemExit) as exc:
            main(['-i'], input_fn=closed)
        assert exc.value.code == 1
        assert "Error: no input for arrival rate" in capsys.readouterr().out

    def test_end_of_input_at_teller_prompt(self, capsys):
        replies = iter(['1.0'])

        def answer_once(prompt):
            try:
                return next(replies)
            except StopIteration:
                raise EOFError from None

        with pytest.raises(SystemExit) as exc:
            main(['-i'], input_fn=answer_once)
        assert exc.value.code == 1
        assert "Error: no input for number of tellers" in capsys.readouterr().out

    def test_quiet_replications_with_plot_file(self, tmp_path, capsys):
        plot_file = tmp_path / "day.png"
        main(['--arrival-rate', '1.0', '--tellers', '2', '-t', '30', '-s', '1',
              '-r', '2', '-q', '--plot-file', str(plot_file)])
        assert capsys.readouterr().out == ""
        assert plot_file.exists()

    def test_missing_parameters_without_terminal(self, monkeypatch, capsys):
        monkeypatch.setattr(run_simulation, 'stdin_is_terminal', lambda: False)
        with pytest.raises(SystemExit) as exc:
            main(['--tellers', '2'])
        assert exc.value.code == 1
        assert "arrival_rate" in capsys.readouterr().out

    def test_config_file_and_json_output(self, tmp_path):
        config_path = tmp_path / "bank.json"
        config_path.write_text(json.dumps({'arrival_rate': 0.7, 'num_tellers': 1, 'seed': 3}))
        output = tmp_path / "result.json"

        main(['--config', str(config_path), '--tellers', '2', '-t', '60', '-q', '-o', str(output)])

        data = json.loads(output.read_text())
        assert data['config']['num_tellers'] == 2
        assert data['config']['minutes'] == 60
        metrics = data['metrics']
        assert metrics['total_arrivals'] - metrics['total_served'] == metrics['left_in_queue']

    def test_replications_output(self, tmp_path, capsys):
        output = tmp_path / "reps.json"
        main(['--arrival-rate', '1.0', '--tellers', '2', '-t', '60', '-s', '10',
              '-r', '3', '-o', str(output)])
        assert "Replications: 3" in capsys.readouterr().out

        data = json.loads(output.read_text())
        assert data['replications'] == 3
        low, high = data['mean_wait_ci95']
        assert low <= data['metrics']['mean_wait']['mean'] <= high


class TestReplications:

    def test_seeded_replications_are_reproducible(self):
        config = SimulationConfig(arrival_rate=1.2, num_tellers=2, minutes=60)
        first = run_replications(config, 3, base_seed=5)
        second = run_replications(config, 3, base_seed=5)
        assert first['metrics']['mean_wait']['mean'] == second['metrics']['mean_wait']['mean']

    def test_confidence_interval_degenerate(self):
        assert confidence_interval([2.0]) == [2.0, 2.0]
        assert confidence_interval([1.0, 1.0, 1.0]) == [1.0, 1.0]

    def test_confidence_interval_brackets_mean(self):
        low, high = confidence_interval([1.0, 2.0, 3.0, 4.0])
        assert low < 2.5 < high
