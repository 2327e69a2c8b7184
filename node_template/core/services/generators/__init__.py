"""
Generators — produce template layouts for file-writing scaffolders.

Each generator module exposes a ``build_layout()`` function that returns
a ``ScaffoldLayout`` of directories and ``GeneratedFile`` instances.
"""
