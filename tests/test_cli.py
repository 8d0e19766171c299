#!/usr/bin/env python3
"""
Command line entry point, run as a subprocess.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _run(args: list[str], *, stdin: bytes = b"") -> subprocess.CompletedProcess[bytes]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "bfvm", *args],
        cwd=ROOT,
        env=env,
        input=stdin,
        capture_output=True,
        check=False,
    )


def test_cli_eval():
    proc = _run(["-e", "+" * 33 + "....."])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"!!!!!"


def test_cli_file(tmp_path: Path):
    p = tmp_path / "echo.bf"
    p.write_text("echo until NUL: ,[.,]\n", encoding="utf-8")

    proc = _run([str(p)], stdin=b"hey\x00")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"hey"


def test_cli_missing_file(tmp_path: Path):
    proc = _run([str(tmp_path / "nope.bf")])
    assert proc.returncode == 1
    assert b"Couldn't read" in proc.stderr


def test_cli_requires_one_program():
    assert _run([]).returncode == 2
    assert _run(["x.bf", "-e", "+"]).returncode == 2


def test_cli_rejects_bad_tape_size():
    proc = _run(["-e", "+", "--tape-size", "0"])
    assert proc.returncode == 2


def test_cli_reports_unbalanced_loop():
    proc = _run(["-e", "+.-["])
    assert proc.returncode == 1
    assert proc.stdout == b"\x01"
    assert b"UnbalancedLoopStart" in proc.stderr


def test_cli_reports_exhausted_input():
    proc = _run(["-e", ",.,"], stdin=b"z")
    assert proc.returncode == 1
    assert proc.stdout == b"z"
    assert b"InputExhausted" in proc.stderr


def test_cli_stats_and_trace():
    proc = _run(["-e", "++>+", "--stats", "--trace", "--tape-size", "16"])
    assert proc.returncode == 0, proc.stderr
    err = proc.stderr.decode()
    assert "step 3: ip=3 op=+ dp=1 cell=0" in err
    assert "4 steps" in err
    assert "Data pointer: 1" in err
    assert "     0:   2   1   0   0   0   0   0   0" in err


def test_cli_file_with_undecodable_comments(tmp_path: Path):
    p = tmp_path / "latin1.bf"
    p.write_bytes(b"caf\xe9 " + b"+" * 33 + b".")

    proc = _run([str(p)])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"!"


def test_cli_trace_streams_while_running():
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    # never terminates: the loop body is empty and the cell stays 1
    proc = subprocess.Popen(
        [sys.executable, "-m", "bfvm", "--trace", "-e", "+[]"],
        cwd=ROOT,
        env=env,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )
    try:
        first = proc.stderr.readline()
        second = proc.stderr.readline()
    finally:
        proc.kill()
        proc.wait()
        proc.stderr.close()
    assert first == b"step 0: ip=0 op=+ dp=0 cell=0\n"
    assert second == b"step 1: ip=1 op=[ dp=0 cell=1\n"
