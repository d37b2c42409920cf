"""Package manager integration.

Import from submodules:
- commands: build_install_command, detect_package_manager, validate_package_manager
- abc: PackageInstaller
- real: RealPackageInstaller
- fake: FakePackageInstaller
"""
