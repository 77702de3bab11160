"""
# Mac-Toggle: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import itertools
import unittest

from mactoggle.constants import SUBSTITUTE_FROM_MARKER_TAG
from mactoggle.core import rewrite
from mactoggle.employables import MarkerTableReplacement

MIXED_MARKERS_SOURCE = '''\
public class Core {
	/*IF-NOT-MAC
	static final String OS = "other";
	//END-NOT-MAC*/
	//IF-MAC
	static final String OS = "mac";
	//END-MAC
	void init() {
		//ELSE-IF-MAC
		loadMacLibraries();
		//ELSE-IF-NOT-MAC
		int area = width * height / 2; /* IF-MAC, but not a marker */
	}
}
'''
MIXED_MARKERS_REWRITTEN = '''\
public class Core {
	//IF-NOT-MAC
	static final String OS = "other";
	//END-NOT-MAC
	/*IF-MAC
	static final String OS = "mac";
	//END-MAC*/
	void init() {
		/*ELSE-IF-MAC
		loadMacLibraries();
		//ELSE-IF-NOT-MAC*/
		int area = width * height / 2; /* IF-MAC, but not a marker */
	}
}
'''


class TestCore(unittest.TestCase):
    maxDiff = None

    def test_rewrite_empty(self):
        self.assertEqual(rewrite(''), '')

    def test_rewrite_marker_free(self):
        for text in [
            'public class Lemmini {}\n',
            '/* IF MAC */ // END MAC\r\n',
            '/** Javadoc. */\n// line comment\n//*/*/*//\n',
            'IF-MAC END-MAC IF-NOT-MAC END-NOT-MAC ELSE-IF-MAC ELSE-IF-NOT-MAC',
            '// if-mac\n/*If-Mac*/\n//IF-MA\n//IF_MAC\n',
        ]:
            self.assertEqual(rewrite(text), text)

    def test_rewrite_each_marker(self):
        self.assertEqual(rewrite('/*IF-NOT-MAC*/'), '//IF-NOT-MAC')
        self.assertEqual(rewrite('/*END-NOT-MAC*/'), '//END-NOT-MAC')
        self.assertEqual(rewrite('**END-MAC**'), '//END-MAC*/')
        self.assertEqual(rewrite('/IF-MAC/'), '/*IF-MAC')
        self.assertEqual(rewrite('*ELSE-IF-MAC*'), '/*ELSE-IF-MAC')
        self.assertEqual(rewrite('/ELSE-IF-NOT-MAC/'), '//ELSE-IF-NOT-MAC*/')

    def test_rewrite_every_occurrence(self):
        self.assertEqual(
            rewrite('/*IF-MAC\nfirst();\n*IF-MAC\nsecond();\n///IF-MAC*\nthird();\n'),
            '/*IF-MAC\nfirst();\n/*IF-MAC\nsecond();\n/*IF-MAC\nthird();\n',
        )

    def test_rewrite_requires_leading_delimiter(self):
        # marker regex is `[*/]+«tag»[*/]*`: a bare tag with no leading `*` or `/` is left alone
        self.assertEqual(rewrite('IF-MAC*/'), 'IF-MAC*/')
        self.assertEqual(rewrite('/*IF-MAC\nIF-MAC\n'), '/*IF-MAC\nIF-MAC\n')

    def test_rewrite_mixed_markers(self):
        self.assertEqual(rewrite(MIXED_MARKERS_SOURCE), MIXED_MARKERS_REWRITTEN)
        self.assertEqual(
            rewrite(MIXED_MARKERS_SOURCE, apply_substitutions_simultaneously=True),
            MIXED_MARKERS_REWRITTEN,
        )

    def test_rewrite_folder_dialog(self):
        self.assertEqual(
            rewrite(
                '\t\tsourcePath = srcPath;\r\n'
                '\r\n'
                '\t\t/*IF-NOT-MAC\r\n'
                '\t\tjTextFieldTrg.setText( trgPath );\r\n'
                '\t\ttargetPath = trgPath;\r\n'
                '\t\t//END-NOT-MAC*/\r\n'
                '\t}\r\n'
            ),
            '\t\tsourcePath = srcPath;\r\n'
            '\r\n'
            '\t\t//IF-NOT-MAC\r\n'
            '\t\tjTextFieldTrg.setText( trgPath );\r\n'
            '\t\ttargetPath = trgPath;\r\n'
            '\t\t//END-NOT-MAC\r\n'
            '\t}\r\n'
        )

    def test_rewrite_idempotent(self):
        for text in [
            MIXED_MARKERS_SOURCE,
            MIXED_MARKERS_REWRITTEN,
            '/*IF-MAC*/ /**/END-MAC/**/ ///ELSE-IF-MAC/// **ELSE-IF-NOT-MAC** */IF-NOT-MAC/* /END-NOT-MAC/',
        ]:
            rewritten_once = rewrite(text)
            self.assertEqual(rewrite(rewritten_once), rewritten_once)
            self.assertEqual(
                rewrite(rewritten_once, apply_substitutions_simultaneously=True),
                rewritten_once,
            )

    def test_rewrite_order_independent(self):
        rewrite_table = list(SUBSTITUTE_FROM_MARKER_TAG.items())

        for permutation in itertools.permutations(rewrite_table):
            marker_table_replacement = MarkerTableReplacement('permutation', verbose_mode_enabled=False)
            for tag, substitute in permutation:
                marker_table_replacement.add_substitution(tag, substitute)
            marker_table_replacement.commit()

            self.assertEqual(marker_table_replacement.apply(MIXED_MARKERS_SOURCE), MIXED_MARKERS_REWRITTEN)

    def test_rewrite_shared_delimiter_run(self):
        self.assertEqual(rewrite('/IF-MAC/END-MAC'), '/*IF-MACEND-MAC')
        self.assertEqual(rewrite('//IF-NOT-MAC//END-NOT-MAC//'), '//IF-NOT-MACEND-NOT-MAC//')
        self.assertEqual(rewrite('/IF-MAC/END-MAC', apply_substitutions_simultaneously=True), '/*IF-MACEND-MAC')

    def test_rewrite_closing_substitute_feeds_later_marker(self):
        self.assertEqual(rewrite('/END-MAC/ELSE-IF-MAC'), '//END-MAC/*ELSE-IF-MAC')
        self.assertEqual(rewrite('//END-MAC/*ELSE-IF-MAC'), '//END-MAC/*ELSE-IF-MAC')
        self.assertEqual(
            rewrite('/END-MAC/ELSE-IF-MAC', apply_substitutions_simultaneously=True),
            '//END-MAC*/ELSE-IF-MAC',
        )


if __name__ == '__main__':
    unittest.main()
