import sys

from pydantic import ValidationError

import provbuild.settings
from provbuild.dispatch import BuildDispatcher
from provbuild.errors import BuildError
from provbuild.platforms import parse_platform


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    try:
        platform = parse_platform(args)
        builder = BuildDispatcher(platform, provbuild.settings.Settings())
        builder.build()
    except (BuildError, ValidationError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0
