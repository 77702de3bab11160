"""
# Mac-Toggle: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core rewriting logic.

Source files are annotated with platform-conditional markers embedded in comments:
````
/*IF-NOT-MAC
«code for every platform except Mac»
//END-NOT-MAC*/

//IF-MAC
«code for Mac»
//END-MAC
````
Rewriting normalises every delimited marker to its toggled form,
whatever run of `*` and `/` it was previously surrounded by:
- `IF-NOT-MAC` and `END-NOT-MAC` become line comments, leaving the not-Mac code live;
- `IF-MAC` (resp. `ELSE-IF-MAC`) opens a block comment
  which `END-MAC` (resp. `ELSE-IF-NOT-MAC`) closes, leaving the Mac code dead.
"""

from mactoggle.authorities import ReplacementAuthority
from mactoggle.constants import SUBSTITUTE_FROM_MARKER_TAG


def rewrite(text: str, verbose_mode_enabled: bool = False, apply_substitutions_simultaneously: bool = False) -> str:
    """
    Rewrite the Mac markers in a document.

    Never fails; text free of delimited markers is returned unchanged.
    """
    replacement_authority = ReplacementAuthority(verbose_mode_enabled)
    replacement_authority.legislate(
        SUBSTITUTE_FROM_MARKER_TAG,
        id_='mac-markers',
        apply_substitutions_simultaneously=apply_substitutions_simultaneously,
    )

    return replacement_authority.execute(text)
