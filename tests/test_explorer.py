import os
import tempfile
import unittest

from _support import FakeCursesModules, make_screen, write_file


class ExplorerViewTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.modules = FakeCursesModules(
            "retrofm.core.actions",
            "retrofm.filesystem.engine",
            "retrofm.filesystem.entries",
            "retrofm.ui.explorer",
        )
        cls.actions, cls.engine_mod, cls.entries, cls.explorer = cls.modules.install()
        cls.curses = cls.modules.curses

    @classmethod
    def tearDownClass(cls):
        cls.modules.uninstall()

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        os.mkdir(os.path.join(self.root, "A"))
        os.mkdir(os.path.join(self.root, "B"))
        write_file(os.path.join(self.root, "A", "inner.txt"), b"x")
        write_file(os.path.join(self.root, "a.txt"), b"aaaaa")
        write_file(os.path.join(self.root, "z.txt"), b"zzzzzzzzzz")
        self.engine = self.engine_mod.FileSystemEngine(
            self.root, sort_mode=self.entries.SortMode.NAME_ASC
        )
        self.view = self.explorer.ExplorerView()
        self.view.enter(self.engine)

    def tearDown(self):
        self._tmp.cleanup()

    def _key(self, key):
        return self.view.handle_key(key, self.engine)

    def _highlighted_name(self):
        return self.view.highlighted_entry(self.engine).name

    def test_navigation_wraps_both_ways(self):
        self.assertEqual(self._highlighted_name(), "A")
        self._key("k")
        self.assertEqual(self._highlighted_name(), "z.txt")
        self._key(self.curses.KEY_DOWN)
        self.assertEqual(self._highlighted_name(), "A")
        self._key("j")
        self.assertEqual(self._highlighted_name(), "B")

    def test_descend_and_ascend_restores_highlight(self):
        self._key("l")
        self.assertEqual(self.engine.current_path, os.path.join(self.root, "A"))
        self.assertEqual(self.view.selected_index, 0)

        self._key(self.curses.KEY_LEFT)
        self.assertEqual(self.engine.current_path, self.root)
        self.assertEqual(self._highlighted_name(), "A")

    def test_descend_on_file_is_noop(self):
        self._key("j")
        self._key("j")
        self.assertEqual(self._highlighted_name(), "a.txt")
        self._key("l")
        self.assertEqual(self.engine.current_path, self.root)

    def test_signal_keys(self):
        AppSignal = self.actions.AppSignal
        self.assertEqual(self._key("q"), AppSignal.EXIT)
        self.assertEqual(self._key("s"), AppSignal.OPEN_SORTING)
        self.assertEqual(self._key("m"), AppSignal.OPEN_KEY_MAPPING)
        self.assertEqual(self._key("n"), AppSignal.OPEN_NEW_FILE)
        self.assertEqual(self._key("?"), AppSignal.NONE)

    def test_yank_clear_and_paste(self):
        self._key("j")
        self._key("j")
        self._key("y")
        self.assertEqual(self.engine.selection, (os.path.join(self.root, "a.txt"),))
        self.assertIn("1 item", self.engine.status)

        self._key("c")
        self.assertEqual(self.engine.selection, ())

    def test_paste_clears_selection_on_success(self):
        self._key("j")
        self._key("j")
        self._key("y")
        self._key("k")
        self._key("k")
        self._key("l")

        self._key("v")

        self.assertTrue(os.path.isfile(os.path.join(self.root, "A", "a.txt")))
        self.assertEqual(self.engine.selection, ())
        self.assertEqual(self.engine.status, "Pasted 1 item(s)")

    def test_paste_failure_reports_error_and_keeps_selection(self):
        self._key("j")
        self._key("j")
        self._key("y")

        self._key("v")

        self.assertTrue(self.engine.status_is_error)
        self.assertEqual(len(self.engine.selection), 1)

    def test_paste_with_empty_selection(self):
        self._key("v")
        self.assertEqual(self.engine.status, "Nothing to paste")

    def test_placement_cycle_key(self):
        self._key("d")
        self.assertEqual(self.engine.dir_placement, self.entries.DirPlacement.FIRST)
        self._key("d")
        names = [e.name for e in self.engine.entries]
        self.assertEqual(names, ["a.txt", "z.txt", "A", "B"])

    def test_hidden_toggle_key(self):
        write_file(os.path.join(self.root, ".dot"), b"")
        self._key("g")
        self.assertIsNotNone(self.engine.index_of(".dot"))
        self._key("g")
        self.assertIsNone(self.engine.index_of(".dot"))

    def test_delete_request_sends_prompt_for_highlighted_entry(self):
        self._key("j")
        self._key("j")

        signal = self._key("x")

        self.assertEqual(signal, self.actions.AppSignal.OPEN_CONFIRMATION)
        message = self.view.get_outbound_message()
        self.assertIn("a.txt", message.text_value())
        self.assertIsNone(self.view.get_outbound_message())

    def test_delete_request_uses_selection_prompt(self):
        self._key("y")
        self._key("x")
        self.assertEqual(
            self.view.get_outbound_message().text_value(), self.explorer.DELETE_PROMPT
        )

    def test_confirmed_delete_removes_entry(self):
        self._key("j")
        self._key("j")
        self._key("x")
        self.view.get_outbound_message()

        self.view.handle_inbound_message(self.actions.Message.flag(True), self.engine)

        self.assertFalse(os.path.exists(os.path.join(self.root, "a.txt")))
        self.assertIsNone(self.engine.index_of("a.txt"))

    def test_declined_or_cancelled_delete_keeps_entry(self):
        for reply in (self.actions.Message.flag(False), None):
            self._key("x")
            self.view.handle_inbound_message(reply, self.engine)
            self.assertTrue(os.path.isdir(os.path.join(self.root, "A")))
            self.assertEqual(self.engine.status, "Deletion cancelled")

    def test_unrelated_reply_is_ignored(self):
        self.view.handle_inbound_message(self.actions.Message.flag(True), self.engine)
        self.assertTrue(os.path.isdir(os.path.join(self.root, "A")))

    def test_empty_directory_has_no_highlight(self):
        self._key("j")
        self._key("l")
        self.assertEqual(self.engine.current_path, os.path.join(self.root, "B"))
        self.assertIsNone(self.view.selected_index)
        self.assertIsNone(self.view.highlighted_entry(self.engine))
        self.assertEqual(self._key("x"), self.actions.AppSignal.NONE)
        self._key("j")
        self.assertIsNone(self.view.selected_index)

    def test_keys_clear_previous_status(self):
        self.engine.set_status("old", error=True)
        self._key("j")
        self.assertIsNone(self.engine.status)

    def test_scroll_follows_highlight(self):
        self.view.selected_index = 3
        self.view._ensure_visible(2)
        self.assertEqual(self.view.scroll_offset, 2)
        self.view.selected_index = 0
        self.view._ensure_visible(2)
        self.assertEqual(self.view.scroll_offset, 0)

    def test_draw_renders_rows_and_footer(self):
        self._key("y")
        screen = make_screen(20, 120)

        self.view.draw(screen, self.engine)

        drawn = [str(c.args[2]) for c in screen.addnstr.call_args_list]
        joined = "\n".join(drawn)
        self.assertIn(self.root, joined)
        self.assertTrue(any("* A/" in line for line in drawn))
        self.assertIn("Key Mappings:<m>", joined)
        self.assertIn("sort: name asc", joined)


if __name__ == "__main__":
    unittest.main()
