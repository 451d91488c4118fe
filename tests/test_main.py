import config
import main


def test_demo_maps(capsys):
    assert main.run_demo('open', 16) == 3
    assert main.run_demo('detour', 16) == 5
    assert main.run_demo('walled', 16) == config.NO_PATH
    assert main.run_demo('single', 1) == 0
    out = capsys.readouterr().out
    assert "[walled] no path" in out
    assert "[detour] (2, 3) -> (5, 3): 5 steps" in out


def test_main_runs_selected_maps(capsys):
    assert main.main(['single', 'open']) == 0
    out = capsys.readouterr().out
    assert "[single]" in out
    assert "[open]" in out
    assert "[detour]" not in out
