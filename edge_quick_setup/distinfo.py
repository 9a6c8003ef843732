import platform

VERSION = "0.1.0"

# platform.machine() reports the kernel name, the setup tool uses the Go-style one
_ARCH_ALIASES = {'aarch64': 'arm64'}


def host_os():
    return platform.system().lower()


def host_arch():
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


OS = host_os()
ARCH = host_arch()
