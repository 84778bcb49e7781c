import argparse
import asyncio
import dataclasses
import json
import logging
import os.path
from typing import Optional

import aiofiles
import aiofiles.os
import asyncio_pool
from tqdm.auto import tqdm

from tileindex.archive import ArchiveRequest
from tileindex.asyncio.archive import AsyncArchiveBuilder
from tileindex.asyncio.connector import AsyncConnector
from tileindex.asyncio.local import AsyncLocalConnector
from tileindex.config import IndexConfig
from tileindex.index import DirectoryIndex, Tile
from tileindex.local import LocalConnector
from tileindex.pagination import parse_page_params
from tileindex.urls import IndexUrls

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def archive_file_name(root_path: str) -> str:
    name = os.path.basename(os.path.normpath(root_path))
    if name in ['', '.', '..', os.sep]:
        name = 'archive'
    return f'{name}.zip'


def destination_paths(root_paths: list[str], output_dir: str) -> list[str]:
    """Assign one archive path per root, numbering repeated names."""
    result, used = [], set()
    for root_path in root_paths:
        base, extension = os.path.splitext(archive_file_name(root_path))
        name, counter = base + extension, 0
        while name in used:
            counter += 1
            name = f'{base}-{counter}{extension}'
        used.add(name)
        result.append(os.path.join(output_dir, name))
    return result


def format_tile(tile: Tile) -> str:
    line = f'[{tile.kind}] {tile.name} -> {tile.link}'
    presentation = tile.presentation
    if presentation is not None:
        line += f' ({presentation.kind}'
        for field in ['source', 'poster', 'thumbnail']:
            value = getattr(presentation, field)
            if value is not None and value != presentation.link:
                line += f', {field}={value}'
        line += ')'
    return line


class CLI:
    """Directory index browse/export class.

    Attributes
    ----------
    config : IndexConfig
        Index settings.
    local_connector : AsyncConnector
        Async local connector used for exports.
    """

    def __init__(
        self,
        config: Optional[IndexConfig] = None,
        local_connector: Optional[AsyncConnector] = None
    ):
        self.config = config or IndexConfig()
        self.local_connector = local_connector or AsyncLocalConnector()

    def browse(
        self,
        path: str,
        page: Optional[str] = None,
        page_size: Optional[str] = None,
        uri: Optional[str] = None,
        show_hidden: bool = False
    ) -> list[Tile]:
        """List the tiles of one page.

        Parameters
        ----------
        path : str
            Directory path.
        page : str, optional
            Raw page index, 0 if missing or malformed.
        page_size : str, optional
            Raw page size, configured default if missing or malformed.
        uri : str, optional
            URI of the directory, the index root if omitted.
        show_hidden : bool, default=False
            Include hidden entries.

        Returns
        -------
        list[Tile]
            Page tiles.
        """
        page_number, size = parse_page_params(page, page_size, self.config.page_size)
        urls = IndexUrls(
            self.config.root_uri, uri or self.config.root_uri,
            resource_dir=self.config.resource_dir, default_page_size=self.config.page_size
        )
        index = DirectoryIndex(LocalConnector(), self.config)
        return index.tiles(path, urls, page_number, size, show_hidden)

    async def export(
        self,
        root_paths: list[str],
        output_dir: str,
        request: ArchiveRequest,
        num_workers: int = 4
    ) -> list[str]:
        """Export files and directories as zip archives.

        Parameters
        ----------
        root_paths : list[str]
            Files or directories to export.
        output_dir : str
            Directory receiving one ``<name>.zip`` per root.
        request : ArchiveRequest
            Archive options.
        num_workers : int, default=4
            Max concurrent exports.

        Returns
        -------
        list[str]
            Error paths.
        """
        async with self.local_connector.connect() as lc:
            await aiofiles.os.makedirs(output_dir, exist_ok=True)
            builder = AsyncArchiveBuilder(lc, chunk_size=self.config.chunk_size)
            archives_pbar = tqdm(total=len(root_paths), desc='Archives')
            bytes_pbar = tqdm(desc='Bytes', unit='B', unit_scale=True)
            error_paths = []
            destinations = destination_paths(root_paths, output_dir)
            # archives may land inside an exported tree, never archive them
            root_request = dataclasses.replace(
                request,
                exclude=request.exclude | {os.path.realpath(path) for path in destinations}
            )
            async with asyncio_pool.AioPool(size=num_workers) as pool:
                futures = []
                for root_path, destination_path in zip(root_paths, destinations):
                    futures.append((root_path, await pool.spawn(self._export_one(
                        builder, root_path, destination_path, root_request, archives_pbar, bytes_pbar
                    ))))
            for root_path, future in futures:
                if not future.result():
                    error_paths.append(root_path)
            archives_pbar.close()
            bytes_pbar.close()
        return error_paths

    @staticmethod
    async def _export_one(
        builder: AsyncArchiveBuilder,
        root_path: str,
        destination_path: str,
        request: ArchiveRequest,
        archives_pbar: tqdm,
        bytes_pbar: tqdm
    ) -> bool:
        try:
            async with aiofiles.open(destination_path, 'wb') as dst_file:
                async for chunk in builder.stream(root_path, request):
                    await dst_file.write(chunk)
                    bytes_pbar.update(len(chunk))
            logger.debug(f"exported '{root_path}' to '{destination_path}'")
            return True
        except Exception as err:
            logger.error(f"failed to export '{root_path}': {err}")
            if await builder.connector.exists(destination_path):
                await aiofiles.os.remove(destination_path)
            return False
        finally:
            archives_pbar.update(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tileindex',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='to see action help message:\n  tileindex browse -h\n  tileindex export -h'
    )
    subparsers = parser.add_subparsers(dest='action')
    browse_parser = subparsers.add_parser('browse', help='list one page of a directory index')
    export_parser = subparsers.add_parser('export', help='export files or directories as zip archives')
    subparsers.required = True
    for subparser in [browse_parser, export_parser]:
        subparser.add_argument('--config_path', type=str, default=None, help='path to configuration file')
        subparser.add_argument('--hidden', action='store_true', dest='hidden', help='include hidden entries')
        subparser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    browse_parser.add_argument('path', type=str, help='directory path')
    browse_parser.add_argument('--page', type=str, default=None, help='page index')
    browse_parser.add_argument('--page_size', type=str, default=None, help='page size')
    browse_parser.add_argument('--uri', type=str, default=None, help='URI of the directory')
    browse_parser.add_argument('--json', action='store_true', dest='json', help='print tiles as JSON')
    export_parser.add_argument('paths', nargs='+', type=str, help='files or directories to export')
    export_parser.add_argument('--output_dir', type=str, default='.', help='output folder path')
    export_parser.add_argument('--nest', action='store_true', dest='nest', help='include subdirectories')
    export_parser.add_argument('--store', action='store_true', dest='store', help='store without compression')
    export_parser.add_argument('--workers', type=int, default=4, help='max workers')
    return parser


async def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    config = IndexConfig.from_yaml(args.config_path) if args.config_path else IndexConfig()
    cli = CLI(config)
    if args.action == 'browse':
        tiles = cli.browse(args.path, page=args.page, page_size=args.page_size,
                           uri=args.uri, show_hidden=args.hidden)
        if args.json:
            print(json.dumps([dataclasses.asdict(tile) for tile in tiles], indent=2))
        else:
            for tile in tiles:
                print(format_tile(tile))
        return 0
    elif args.action == 'export':
        request = ArchiveRequest(include_hidden=args.hidden, recursive=args.nest, store_only=args.store)
        error_paths = await cli.export(args.paths, args.output_dir, request, num_workers=args.workers)
        print(f'Error paths: {error_paths}')
        return 1 if error_paths else 0
    else:
        raise ValueError(f"invalid action: '{args.action}'")


def run() -> None:
    raise SystemExit(asyncio.run(main()))
