import io

import pytest

from shellpp.procinfo import (
    child_pids,
    cpu_utilization,
    heuristic,
    read_stat,
    read_uptime,
)


def write_stat(root, pid, state="S", ppid=1, utime=0, stime=0, start=0, tty=0, comm="proc"):
    directory = root / str(pid)
    directory.mkdir(parents=True, exist_ok=True)
    line = (
        f"{pid} ({comm}) {state} {ppid} {pid} {pid} {tty} -1 4194304 0 0 0 0 "
        f"{utime} {stime} 0 0 20 0 1 0 {start} 1000 100 \n"
    )
    (directory / "stat").write_text(line)


def write_uptime(root, seconds):
    (root / "uptime").write_text(f"{seconds} 999.00\n")


def write_children(root, pid, tid, children, trailing=" "):
    task = root / str(pid) / "task" / str(tid)
    task.mkdir(parents=True, exist_ok=True)
    (task / "children").write_text(" ".join(str(c) for c in children) + trailing)


def test_read_stat_fields(tmp_path):
    write_stat(tmp_path, 42, state="R", ppid=7, utime=11, stime=13, start=17, tty=34816)
    stat = read_stat(42, tmp_path)
    assert stat.pid == 42
    assert stat.comm == "proc"
    assert stat.state == "R"
    assert stat.ppid == 7
    assert stat.tty == 34816
    assert (stat.utime, stat.stime, stat.start_time) == (11, 13, 17)


def test_read_stat_command_name_with_spaces_and_parens(tmp_path):
    write_stat(tmp_path, 5, ppid=3, comm="my (odd) cmd")
    stat = read_stat(5, tmp_path)
    assert stat.comm == "my (odd) cmd"
    assert stat.ppid == 3


def test_read_stat_missing_process(tmp_path):
    with pytest.raises(OSError):
        read_stat(99, tmp_path)


def test_read_stat_malformed(tmp_path):
    (tmp_path / "8").mkdir()
    (tmp_path / "8" / "stat").write_text("8 no parens here\n")
    with pytest.raises(ValueError):
        read_stat(8, tmp_path)


def test_read_uptime_truncates_fraction(tmp_path):
    write_uptime(tmp_path, "350.75")
    assert read_uptime(tmp_path) == 350


def test_cpu_utilization_full_use(tmp_path):
    write_uptime(tmp_path, "10.00")
    write_stat(tmp_path, 3, utime=600, stime=400, start=0)
    assert cpu_utilization(3, tmp_path) == 100


def test_cpu_utilization_idle(tmp_path):
    write_uptime(tmp_path, "10.00")
    write_stat(tmp_path, 3, utime=0, stime=0, start=0)
    assert cpu_utilization(3, tmp_path) == 0


def test_cpu_utilization_grows_with_time_used(tmp_path):
    write_uptime(tmp_path, "1000.00")
    write_stat(tmp_path, 3, utime=100, stime=0, start=50)
    write_stat(tmp_path, 4, utime=5000, stime=2000, start=50)
    assert cpu_utilization(4, tmp_path) > cpu_utilization(3, tmp_path)


def test_child_pids_across_tasks(tmp_path):
    write_children(tmp_path, 10, 10, [11, 12])
    write_children(tmp_path, 10, 13, [14])
    assert sorted(child_pids(10, tmp_path)) == [11, 12, 14]


def test_child_pids_without_task_dir(tmp_path):
    write_stat(tmp_path, 10)
    assert child_pids(10, tmp_path) == []


def test_heuristic_sums_children(tmp_path):
    write_uptime(tmp_path, "100.00")
    write_children(tmp_path, 20, 20, [21, 22])
    write_stat(tmp_path, 21, utime=3000, stime=1000, start=0)
    write_stat(tmp_path, 22, utime=500, stime=500, start=0)
    out = io.StringIO()
    total = heuristic(20, tmp_path, out)
    assert total == cpu_utilization(21, tmp_path) + cpu_utilization(22, tmp_path)
    text = out.getvalue()
    assert f"child 21 utilization {cpu_utilization(21, tmp_path)}%" in text
    assert f"child 22 utilization {cpu_utilization(22, tmp_path)}%" in text


def test_heuristic_without_children_is_zero(tmp_path):
    write_children(tmp_path, 20, 20, [], trailing="")
    out = io.StringIO()
    assert heuristic(20, tmp_path, out) == 0
    assert out.getvalue() == ""


def test_heuristic_unreadable_children_file_returns_two(tmp_path):
    (tmp_path / "30" / "task" / "30").mkdir(parents=True)
    assert heuristic(30, tmp_path, io.StringIO()) == 2