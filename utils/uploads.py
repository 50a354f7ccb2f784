from fastapi import UploadFile

CHUNK_SIZE = 64 * 1024


async def read_limited(upload: UploadFile, max_bytes: int) -> bytes:
    """
    Read at most max_bytes + 1 bytes of an upload. A result longer than
    max_bytes means the file is over the limit; the rest is never buffered.
    """
    if upload.size is not None and upload.size > max_bytes:
        return await upload.read(max_bytes + 1)
    chunks: list[bytes] = []
    total = 0
    while total <= max_bytes:
        chunk = await upload.read(min(CHUNK_SIZE, max_bytes + 1 - total))
        if not chunk:
            break
        chunks.append(chunk)
        total += len(chunk)
    return b"".join(chunks)
