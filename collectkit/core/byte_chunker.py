#!filepath: collectkit/core/byte_chunker.py
from __future__ import annotations

from typing import Iterator, List, Union

from collectkit.config.collections_config import CollectionsConfig
from collectkit.utils.argument import Argument
from collectkit.utils.logger import logs

BytesLike = Union[bytes, bytearray, memoryview]


class ByteChunker:
    """
    把字节缓冲区切成定长块（最后一块可以更短）：

        12 bytes, chunk_size=5  →  [0,5) [5,10) [10,12)

    约束：
        - 除最后一块外，每块长度严格等于 chunk_size
        - 空输入 → []（不是 [b""]）
        - chunk_size <= 0 → InvalidArgumentError，在分配结果之前校验
        - 输出永远是 bytes，与输入类型无关
    """

    @staticmethod
    def chunk_count(length: int, chunk_size: int) -> int:
        Argument.positive(chunk_size, "chunk_size")
        Argument.not_negative(length, "length")
        return -(-length // chunk_size)

    @classmethod
    def split_in_chunks(cls, data: BytesLike, chunk_size: int) -> List[bytes]:
        """
        从最后一块往前计算边界；结果与 iter_chunks 逐字节一致。
        """
        Argument.not_null(data, "data")
        Argument.positive(chunk_size, "chunk_size")
        # 按字节切：typed memoryview 的 len 是元素个数
        view = memoryview(data).cast("B")
        count = cls.chunk_count(len(view), chunk_size)

        chunks: List[bytes] = [b""] * count

        end = len(view)
        start = (count - 1) * chunk_size
        for i in range(count - 1, -1, -1):
            chunks[i] = view[start:end].tobytes()
            end = start
            start = end - chunk_size

        logs.debug(f"[Chunk] split {len(view)} bytes into {count} chunks (size={chunk_size})")
        return chunks

    @staticmethod
    def iter_chunks(data: BytesLike, chunk_size: int) -> Iterator[bytes]:
        """
        正向流式版本，适合边切边发送（网络帧 / 块写入）。
        参数在第一次 next() 之前就会校验。
        """
        Argument.not_null(data, "data")
        Argument.positive(chunk_size, "chunk_size")
        view = memoryview(data).cast("B")

        def _gen() -> Iterator[bytes]:
            for start in range(0, len(view), chunk_size):
                yield view[start:start + chunk_size].tobytes()

        return _gen()

    @classmethod
    def split_with(cls, data: BytesLike, config: CollectionsConfig) -> List[bytes]:
        return cls.split_in_chunks(data, config.chunk_size)
