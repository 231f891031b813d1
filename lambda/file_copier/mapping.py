from file_copier.config import CopierConfig


def should_copy(bucket: str, key: str, config: CopierConfig) -> bool:
    # plain string prefix test: "data" also matches "database/x"
    return bucket == config.source_bucket and key.startswith(config.source_prefix)


def build_destination_key(source_key: str, config: CopierConfig) -> str:
    """Map a source key to its destination key.

    With no destination prefix the key is copied as is, source prefix
    included. Otherwise the source prefix (when present) is replaced by the
    destination prefix.
    """
    if not config.destination_prefix:
        return source_key

    relative_key = source_key
    if config.source_prefix and source_key.startswith(config.source_prefix):
        relative_key = source_key[len(config.source_prefix):]

    return config.destination_prefix + relative_key
