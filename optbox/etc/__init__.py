"""General helpers.

Nothing in `optbox.etc` imports anything from the rest of `optbox`, only other
things in `optbox.etc` and external dependencies. That way the rest of the
package can lean on it without worrying about import cycles.
"""

from . import txt, err, env, ctx
