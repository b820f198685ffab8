"""Tests for the command-line interface."""

import os
import sys
import tempfile

import pytest

from repohunt.cli import build_parser, main, options_from_args


def test_main_prints_repos_one_per_line(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        root = os.path.realpath(tmp)
        os.makedirs(os.path.join(root, "alpha", ".git"))
        os.makedirs(os.path.join(root, "beta", ".git"))
        main([root])
        out, err = capsys.readouterr()
        lines = out.splitlines()
        assert sorted(lines) == [os.path.join(root, "alpha"), os.path.join(root, "beta")]
        assert err == ""


def test_main_no_repos_is_not_an_error(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        main([tmp])
        out, _ = capsys.readouterr()
        assert out == ""


def test_main_defaults_to_current_directory(capsys, monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        os.makedirs(os.path.join(tmp, "proj", ".git"))
        monkeypatch.chdir(tmp)
        main([])
        out, _ = capsys.readouterr()
        assert out.splitlines() == [os.path.join(os.getcwd(), "proj")]


def test_main_missing_root_exits_nonzero(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(SystemExit) as exc:
            main([os.path.join(tmp, "does-not-exist")])
        assert exc.value.code == 1
        _, err = capsys.readouterr()
        assert "invalid or does not exist" in err


def test_main_file_root_exits_nonzero(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "notes.txt")
        with open(path, "w") as f:
            f.write("hi\n")
        with pytest.raises(SystemExit) as exc:
            main([path])
        assert exc.value.code == 1
        _, err = capsys.readouterr()
        assert "is not a directory" in err


def test_main_all_flag_includes_hidden(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        root = os.path.realpath(tmp)
        os.makedirs(os.path.join(root, ".dotfiles", ".git"))
        main([root])
        assert capsys.readouterr().out == ""
        main(["-a", root])
        assert capsys.readouterr().out.splitlines() == [os.path.join(root, ".dotfiles")]


def test_main_max_depth(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        root = os.path.realpath(tmp)
        os.makedirs(os.path.join(root, "a", "b", "c", ".git"))
        main(["-d", "2", root])
        assert capsys.readouterr().out == ""
        main(["--max-depth", "3", root])
        assert capsys.readouterr().out.splitlines() == [os.path.join(root, "a", "b", "c")]


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_main_verbose_reports_skipped_symlinks(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        root = os.path.realpath(tmp)
        os.makedirs(os.path.join(root, "target"))
        os.symlink(os.path.join(root, "target"), os.path.join(root, "link"))
        main([root])
        assert capsys.readouterr().err == ""
        main(["-v", root])
        assert "because it is a symlink" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.path is None
    assert args.show_all is False
    assert args.symlinks is None
    assert args.paranoid is False
    assert args.verbose is False
    assert args.max_depth == 10
    assert args.any_depth is False
    assert args.descend_rejected is False


def test_options_from_args():
    with tempfile.TemporaryDirectory() as tmp:
        args = build_parser().parse_args(["-a", "-s", "-p", "-v", "--any-depth", "--descend-rejected", tmp])
        options = options_from_args(args)
        assert options.root == os.path.realpath(tmp)
        assert options.show_all is True
        assert options.follow_symlinks is True
        assert options.paranoid is True
        assert options.verbose is True
        assert options.max_depth is None
        assert options.descend_rejected is True


@pytest.mark.parametrize("value, follow", [("follow", True), ("FOLLOW", True), ("Skip", False)])
def test_symlink_strategy_is_case_insensitive(value, follow):
    with tempfile.TemporaryDirectory() as tmp:
        args = build_parser().parse_args(["--symlinks", value, tmp])
        assert options_from_args(args).follow_symlinks is follow


@pytest.mark.parametrize("argv", [
    ["--symlinks", "sometimes"],
    ["-s", "--symlinks", "skip"],
    ["-d", "3", "--any-depth"],
    ["-d", "-1"],
    ["-d", "deep"],
])
def test_parser_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(argv)
    assert exc.value.code == 2


def test_main_prints_emoji_codes_verbatim(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        root = os.path.realpath(tmp)
        os.makedirs(os.path.join(root, "release:rocket:", ".git"))
        main([root])
        assert capsys.readouterr().out.splitlines() == [os.path.join(root, "release:rocket:")]


def test_main_survives_undecodable_repo_name(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        root = os.path.realpath(tmp)
        try:
            os.makedirs(os.path.join(os.fsencode(root), b"bad\xffname", b".git"))
        except (OSError, UnicodeError):
            pytest.skip("filesystem rejects non-UTF-8 names")
        os.makedirs(os.path.join(root, "zz-good", ".git"))
        main(["-a", root])
        lines = capsys.readouterr().out.splitlines()
        assert sorted(lines) == [os.path.join(root, "bad�name"), os.path.join(root, "zz-good")]
