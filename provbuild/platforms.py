from collections import namedtuple
from enum import Enum
from types import MappingProxyType
import os

from provbuild.errors import UsageError


class Platform(Enum):
    WINDOWS = 'windows'
    LINUX = 'linux'
    MACOS = 'macos'


PlatformTarget = namedtuple('PlatformTarget', ['goos', 'goarch', 'suffix', 'label', 'tested'])

# the darwin artifact keeps its .dmg name even though it is a plain binary
REGISTRY = MappingProxyType({
    Platform.WINDOWS: PlatformTarget('windows', 'amd64', '.exe', 'Windows', True),
    Platform.LINUX: PlatformTarget('linux', 'amd64', '', 'Linux', False),
    Platform.MACOS: PlatformTarget('darwin', 'amd64', '.dmg', 'macOS', False),
})

USAGE = 'Usage: build.py <%s>' % '|'.join(p.value for p in Platform)


def parse_platform(args):
    if len(args) != 1:
        raise UsageError(USAGE)
    try:
        return Platform(args[0])
    except ValueError:
        raise UsageError(USAGE) from None


def output_dir(platform, root):
    target = REGISTRY[platform]
    return os.path.join(root, '%s_%s' % (target.goos, target.goarch))


def output_path(platform, root, artifact):
    return os.path.join(output_dir(platform, root), artifact + REGISTRY[platform].suffix)
