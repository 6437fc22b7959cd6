"""
Constants
Centralised storage for pattern sets and filesystem classifications.
"""
# Leading markers added by `diff` / `git diff` to the old and new file paths
DIFF_PREFIX_PATTERN = r"^[ab]/"

# Single trailing characters that are never part of a file name
TRAILING_PUNCTUATION_PATTERN = r"[.,:]\Z"

# Opening → closing delimiters that may wrap a whole token
ENCLOSING_PAIRS: list[tuple[str, str]] = [
    ("(", ")"),
    ("<", ">"),
    ("[", "]"),
    ("{", "}"),
    ("'", "'"),
    ('"', '"'),
]

# Filesystem types treated as network-backed (never probed)
NETWORK_FS_TYPES = frozenset({
    "nfs",
    "nfs4",
    "cifs",
    "smbfs",
    "smb3",
    "afpfs",
    "webdav",
    "davfs",
    "ncpfs",
    "9p",
    "fuse.sshfs",
    "sshfs",
    "fuse.rclone",
    "glusterfs",
    "ceph",
})
