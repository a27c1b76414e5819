import os
import tempfile
import unittest
from unittest import mock

from _support import FakeCursesModules, make_screen


class FileManagerAppTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.modules = FakeCursesModules(
            "retrofm.core.app",
            "retrofm.core.bootstrap",
            "retrofm.core.config",
            "retrofm.filesystem.entries",
        )
        cls.app_mod, cls.bootstrap, cls.config, cls.entries = cls.modules.install()
        cls.fake_curses = cls.modules.curses

    @classmethod
    def tearDownClass(cls):
        cls.modules.uninstall()

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        os.mkdir(os.path.join(self.root, "docs"))

    def tearDown(self):
        self._tmp.cleanup()

    def _config(self, **overrides):
        values = dict(
            theme="hacker",
            sort_mode=self.entries.SortMode.NAME_DESC,
            dir_placement=self.entries.DirPlacement.FIRST,
            start_path=self.root,
        )
        values.update(overrides)
        return self.config.AppConfig(**values)

    def test_configure_terminal_sets_blocking_input(self):
        stdscr = make_screen()
        self.bootstrap.configure_terminal(stdscr)
        stdscr.keypad.assert_called_once_with(True)
        stdscr.nodelay.assert_called_once_with(False)
        stdscr.timeout.assert_called_once_with(-1)
        self.fake_curses.set_escdelay.assert_called_with(25)

    def test_configure_terminal_tolerates_missing_cursor_control(self):
        stdscr = make_screen()
        with mock.patch.object(self.fake_curses, "curs_set", side_effect=self.fake_curses.error("no cursor")):
            self.bootstrap.configure_terminal(stdscr)
        stdscr.keypad.assert_called_once_with(True)

    def test_app_builds_engine_from_config(self):
        app = self.app_mod.FileManagerApp(make_screen(), config=self._config())

        self.assertEqual(app.engine.current_path, self.root)
        self.assertEqual(app.engine.sort_mode, self.entries.SortMode.NAME_DESC)
        self.assertEqual(app.engine.dir_placement, self.entries.DirPlacement.FIRST)
        self.assertEqual(app.theme.key, "hacker")
        self.assertEqual(app.engine.index_of("docs"), 0)

    def test_app_rejects_tiny_terminal(self):
        with self.assertRaises(ValueError):
            self.app_mod.FileManagerApp(make_screen(5, 20), config=self._config())

    def test_app_loads_config_when_not_given(self):
        with mock.patch.object(self.app_mod, "load_config", return_value=self._config()) as load:
            app = self.app_mod.FileManagerApp(make_screen())
        load.assert_called_once_with()
        self.assertEqual(app.engine.current_path, self.root)

    def test_run_quits_on_q_and_closes_popups(self):
        stdscr = make_screen()
        stdscr.get_wch.side_effect = ["m", "j", "n", "\x1b", "q"]
        app = self.app_mod.FileManagerApp(stdscr, config=self._config())

        app.run()

        self.assertFalse(app.running)
        self.assertEqual(app.controller.popup_stack, [])

    def test_cleanup_runs_popup_exit_hooks(self):
        app = self.app_mod.FileManagerApp(make_screen(), config=self._config())
        popup = mock.Mock()
        app.controller.popup_stack.append(popup)

        app.cleanup()

        popup.exit.assert_called_once_with(app.engine)
        self.assertEqual(app.controller.popup_stack, [])


class MainEntryTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.modules = FakeCursesModules("retrofm.__main__")
        (cls.main_mod,) = cls.modules.install()
        cls.fake_curses = cls.modules.curses

    @classmethod
    def tearDownClass(cls):
        cls.modules.uninstall()

    def test_run_returns_zero_on_clean_exit(self):
        self.fake_curses.wrapper = mock.Mock(return_value=None)
        self.assertEqual(self.main_mod.run(), 0)
        self.fake_curses.wrapper.assert_called_once_with(self.main_mod.main)

    def test_run_returns_130_on_keyboard_interrupt(self):
        self.fake_curses.wrapper = mock.Mock(side_effect=KeyboardInterrupt)
        self.assertEqual(self.main_mod.run(), 130)

    def test_run_reports_crash_and_returns_one(self):
        self.fake_curses.wrapper = mock.Mock(side_effect=ValueError("Terminal too small"))
        with mock.patch("builtins.print") as printed:
            self.assertEqual(self.main_mod.run(), 1)
        self.fake_curses.endwin.assert_called()
        self.assertIn("Terminal too small", printed.call_args.args[0])

    def test_logging_disabled_without_debug_env(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(self.main_mod.configure_logging())

    def test_log_path_override(self):
        with mock.patch.dict(os.environ, {"RETROFM_LOG": "/tmp/custom.log"}):
            self.assertEqual(str(self.main_mod.default_log_path()), "/tmp/custom.log")

    def test_debug_env_configures_file_logging(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "logs", "retrofm.log")
            env = {"RETROFM_DEBUG": "1", "RETROFM_LOG": log_file}
            with mock.patch.dict(os.environ, env), \
                    mock.patch.object(self.main_mod.logging, "basicConfig") as basic:
                path = self.main_mod.configure_logging()
            self.assertEqual(str(path), log_file)
            self.assertTrue(os.path.isdir(os.path.dirname(log_file)))
            self.assertEqual(basic.call_args.kwargs["filename"], log_file)


if __name__ == "__main__":
    unittest.main()
