"""Data models for ui-scaffold.

Import from submodules:
- config: Aliases, ProjectConfig, Style
- installation: FileOutcome, InstallOutcome, InstallReport, InstallStage, ResolutionResult
- registry: ComponentEntry, RegistryIndex
"""
