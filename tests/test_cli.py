from ordersim import cli
from ordersim.cli import main
from ordersim.engine.config import load_config
from ordersim.engine.simulation import Simulation


def test_run_with_config(tmp_path, capsys):
    path = tmp_path / "fast.yaml"
    path.write_text(
        "capacity: 2\n"
        "target_count: 6\n"
        "base_latency_ms: 0\n"
        "per_unit_latency_ms: 0\n"
        "log_level: WARNING\n",
        encoding="utf-8",
    )
    main(["run", str(path)])

    out = capsys.readouterr().out
    assert "fulfilled 6/6 orders" in out
    assert "consumer.fulfilled: 6" in out


def test_init_writes_loadable_sample(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["init"])

    out_file = tmp_path / "examples" / "warehouse.yaml"
    assert out_file.exists()
    assert "Wrote" in capsys.readouterr().out
    cfg = load_config(str(out_file))
    assert cfg.capacity == 3
    assert cfg.target_count == 15


def test_no_arguments_runs_default_scenario(monkeypatch, capsys):
    # same default config, without the per-order sleeps
    monkeypatch.setattr(cli, "Simulation", lambda cfg: Simulation(cfg, sleep=lambda s: None))

    assert main([]) is None

    out = capsys.readouterr().out
    assert "fulfilled 15/15 orders" in out
    assert "consumer.fulfilled: 15" in out
