"""Simple tests (verify pytest working)"""

from unittest import TestCase


class TestPackage(TestCase):

    def test_imports(self):
        """Test that all main imports work"""
        try:
            from xml_suggest import (
                Config,
                InvalidChildCodeAction,
                SuggestionBuilder,
                XmlSuggestError,
                get_code_actions,
            )
        except ImportError as e:
            self.fail(e)

    def test_version(self):
        """Test the package exposes its version"""
        import xml_suggest
        from xml_suggest.consts import PACKAGE_VERSION

        self.assertEqual(xml_suggest.__version__, PACKAGE_VERSION)
