import os

import provbuild.gen
import provbuild.toolchain
from provbuild.errors import ConfigError, DirectoryError
from provbuild.platforms import REGISTRY, output_dir, output_path


class BuildDispatcher:

    def __init__(self, platform, settings):
        self.platform = platform
        self.settings = settings
        self.target = REGISTRY[platform]
        self.output_dir = output_dir(platform, settings.registry_root)
        self.output_path = output_path(platform, settings.registry_root, settings.artifact)
        self.cli_config_gen = None
        if settings.cli_config:
            self.cli_config_gen = self.prepare_cli_config()

    def prepare_cli_config(self):
        config_dir = os.path.dirname(os.path.abspath(self.settings.cli_config))
        if not os.path.isdir(config_dir):
            raise ConfigError('CLI config directory does not exist: %s' % config_dir)
        gen = provbuild.gen.CliConfigGen(self.settings.registry_root)
        try:
            gen.get_context()
        except ValueError as e:
            raise ConfigError(str(e)) from e
        return gen

    def ensure_output_dir(self):
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as e:
            raise DirectoryError('cannot create output directory %s: %s' % (self.output_dir, e)) from e

    def compile(self):
        provbuild.toolchain.go_build(self.settings.compiler, self.target.goos, self.target.goarch, self.output_path)

    def write_cli_config(self):
        try:
            with open(self.settings.cli_config, 'w') as f:
                self.cli_config_gen.generate(f)
        except OSError as e:
            raise ConfigError('cannot write CLI config %s: %s' % (self.settings.cli_config, e)) from e
        return self.settings.cli_config

    def build(self):
        suffix = '' if self.target.tested else ' (Untested)'
        print('Building for %s...%s' % (self.target.label, suffix))
        self.ensure_output_dir()
        print('Copying to %s...' % self.output_dir)
        self.compile()
        if self.cli_config_gen is not None:
            print('CLI config written: %s' % self.write_cli_config())
        print('Build complete.')
