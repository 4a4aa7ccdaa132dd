from pathlib import Path


class LocalFileStore:
    """
    Read-only access to attachment files on the local file system.
    """

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def base_name(self, path: str) -> str:
        return Path(path).name


local_file_store = LocalFileStore()
