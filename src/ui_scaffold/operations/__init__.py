"""Operations for ui-scaffold.

Import from submodules:
- resolve: resolve
- transform: transform_imports, rewrite_specifier
- materialize: materialize, resolve_target_path, write_file_atomic
- install: InstallRequest, InstallRun, run_install
"""
