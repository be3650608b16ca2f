import os
import subprocess
import sys

from provbuild.errors import CompilerError


def target_env(goos, goarch, base=None):
    env = dict(os.environ if base is None else base)
    env['GOOS'] = goos
    env['GOARCH'] = goarch
    return env


def go_build(compiler, goos, goarch, out_path):
    cmd = [*compiler, 'build', '-o', out_path]
    sys.stdout.flush()
    try:
        subprocess.run(cmd, env=target_env(goos, goarch), check=True)
    except subprocess.CalledProcessError as e:
        raise CompilerError('%s exited with status %d' % (' '.join(cmd), e.returncode), e.returncode) from e
    except OSError as e:
        raise CompilerError('cannot run %s: %s' % (cmd[0], e)) from e
