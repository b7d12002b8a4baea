from treeqr.trees.models import NormalizedTreeRecord, TreeRecord


def normalize(record: TreeRecord) -> NormalizedTreeRecord:
    """Return a copy of the record with absent collections replaced by empty ones.

    Pure and idempotent: the input record is never modified and every other
    field is carried over unchanged.
    """
    if isinstance(record, NormalizedTreeRecord):
        return record
    fields = record.model_dump()
    for name in ("classification", "location", "images"):
        if fields[name] is None:
            del fields[name]
    return NormalizedTreeRecord.model_validate(fields)
