import unittest
from pkgsetup.model import SetupParams


class TestSetupParams(unittest.TestCase):
    def test_dash_user(self):
        self.assertEqual(SetupParams('mypkg').dash_user, '')
        self.assertEqual(SetupParams('mypkg', user='bob').dash_user, '-bob')
        self.assertEqual(SetupParams('mypkg', user=None).dash_user, '')

    def test_python(self):
        self.assertEqual(SetupParams('mypkg', vm='/usr/bin/python3').python, 'python3')
        self.assertEqual(SetupParams('mypkg', vm='python3.11').python, 'python3.11')

    def test_valid_version(self):
        self.assertTrue(SetupParams('mypkg', version='1.0').has_valid_version)
        self.assertTrue(SetupParams('mypkg', version='2.0.0rc1').has_valid_version)
        self.assertFalse(SetupParams('mypkg', version='one point oh').has_valid_version)

    def test_from_dict(self):
        params = SetupParams.from_dict({'name': 'mypkg', 'version': '1.0', 'unrelated': 'x'})
        self.assertEqual(params.name, 'mypkg')
        self.assertEqual(params.version, '1.0')
        self.assertEqual(params, SetupParams('mypkg', version='1.0'))

    def test_str(self):
        self.assertEqual(str(SetupParams('mypkg', user='bob', version='1.0')), 'mypkg-bob@1.0')
