import unittest
from pkgsetup.makefile import cmd_str_to_makefile


class TestCmdStrToMakefile(unittest.TestCase):
    def test_build_becomes_gen(self):
        self.assertEqual(
            cmd_str_to_makefile('gopy build -output=out -vm=python3 ./mypkg'),
            'gopy gen -output=out -vm=python3 ./mypkg',
        )

    def test_only_subcommand_is_replaced(self):
        self.assertEqual(
            cmd_str_to_makefile('/opt/build/gopy build ./build'),
            '/opt/build/gopy gen ./build',
        )
        self.assertEqual(cmd_str_to_makefile('gopy pkg ./build'), 'gopy pkg ./build')
        self.assertEqual(cmd_str_to_makefile('gopy builder'), 'gopy builder')

    def test_dollar_is_escaped(self):
        self.assertEqual(cmd_str_to_makefile('gen -o $HOME/out'), 'gen -o $$HOME/out')

    def test_empty(self):
        self.assertEqual(cmd_str_to_makefile(''), '')
