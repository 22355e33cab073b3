"""
Only the root tests directory is a package. Subdirectories mirror the layout of
`src/suite_money` and rely on pytest's rootdir-based discovery, so test module
file names must stay unique across the tree.
"""
