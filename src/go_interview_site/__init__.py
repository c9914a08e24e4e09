"""Go Interview Questions: build tooling for the static site.

Core Components:
    cli: ``go-interview`` command group (serve, drafts, build, clean, new, check, pages)
    core/: settings, Hugo command lines, build-output cleanup
    frontmatter/: page metadata contract and validator
    content/: page inventory mirroring the generator's inclusion rules
    utils/: structured logging
"""

__version__ = "0.1.0"
__author__ = "Go Interview Questions maintainers"
__email__ = "maintainers@example.com"

__all__ = ["__author__", "__email__", "__version__"]
