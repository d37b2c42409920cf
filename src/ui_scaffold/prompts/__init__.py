"""User prompts.

Import from submodules:
- abc: Prompter
- real: ClickPrompter, parse_selection
- fake: FakePrompter
"""
