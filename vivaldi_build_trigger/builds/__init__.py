"""Build status checks, build dispatch, and the build-if-outdated workflow."""
