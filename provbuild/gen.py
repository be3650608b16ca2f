from jinja2 import Environment, PackageLoader
import os
import re

VERSION_RE = re.compile(r'\d+\.\d+\.\d+([-+][0-9A-Za-z.+-]+)?')


class CliConfigGen:
    """Renders a Terraform CLI config that installs the provider from the local registry layout.

    The registry root is expected to end in <host>/<namespace>/<name>/<version>;
    everything above that is the filesystem mirror.
    """

    def __init__(self, registry_root):
        self.jinja_env = Environment(
            loader=PackageLoader('provbuild'),
            keep_trailing_newline=True
        )
        self.template = self.jinja_env.get_template('terraformrc.template')
        self.registry_root = registry_root

    def split_root(self):
        parts = os.path.normpath(os.path.abspath(self.registry_root)).split(os.sep)
        if len(parts) < 5:
            raise ValueError('registry root too shallow: %s' % self.registry_root)
        host, namespace, name, version = parts[-4:]
        if not VERSION_RE.fullmatch(version):
            raise ValueError('registry root does not end in a provider version: %s' % self.registry_root)
        if '.' not in host:
            raise ValueError('registry root has no registry host: %s' % self.registry_root)
        mirror = os.sep.join(parts[:-4]) or os.sep
        return mirror, '/'.join((host, namespace, name))

    def get_context(self):
        mirror, address = self.split_root()
        # terraform wants forward slashes even on windows
        return {'MIRROR_PATH': mirror.replace('\\', '/'),
                'PROVIDER_ADDRESS': address}

    def generate(self, outfile):
        ctx = self.get_context()
        txt = self.template.render(**ctx)
        outfile.write(txt)
