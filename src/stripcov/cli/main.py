"""stripcov CLI entry point."""

import sys
from contextlib import ExitStack

import click

from .. import __version__
from ..config import load_config
from ..errors import ConfigError, TracefileFormatError
from ..report import format_json, format_text
from ..tracefile import strip_tracefile


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__, "-v", "--version", prog_name="stripcov")
@click.option(
    "-i",
    "--info",
    "tracefile",
    type=click.Path(dir_okay=False),
    help="LCOV info file to strip",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="stripcov config file listing functions to strip",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Write the new info file here (default: stdout)",
)
@click.option(
    "-t",
    "--topdir",
    help="Common directory of all source files. "
    "Overrides TOPDIR in the config file.",
)
@click.option(
    "-r",
    "--revconf",
    "reverse",
    is_flag=True,
    help="Reverse the meaning of each file's function list: "
    "listed functions are kept, all others stripped.",
)
@click.option(
    "-p",
    "--print-uncf",
    "print_uncovered",
    is_flag=True,
    help="Print the names of kept functions that never ran",
)
@click.option(
    "-d",
    "--dumpconf",
    is_flag=True,
    help="Print the loaded config and exit without stripping",
)
@click.option(
    "--dump-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format for --dumpconf (default: text)",
)
@click.option(
    "-q", "--quiet", is_flag=True, help="Do not print progress messages"
)
def cli(
    tracefile,
    config_path,
    output,
    topdir,
    reverse,
    print_uncovered,
    dumpconf,
    dump_format,
    quiet,
):
    """Strip selected functions' data from an LCOV info file.

    The result is a new info file compatible with LCOV's own output, with
    the FNF/FNH, BRF/BRH and LF/LH counters of each record adjusted to
    match what was removed.

    Config file format:

    \b
        TOPDIR=/home/builder/src/
        lib/foo.c:
            generated_table    # comment
            test_helper
        lib/bar.c:
            ...

    Examples:

    \b
        stripcov -i app.info -c strip.conf -o app.stripped.info
        stripcov -i app.info -c strip.conf -r -p > app.stripped.info
        stripcov -c strip.conf --dumpconf
    """
    if tracefile is None and not dumpconf:
        raise click.UsageError("Missing option '-i' / '--info'.")

    try:
        config = load_config(
            config_path,
            topdir=topdir,
            reversed=reverse,
            diagnostics=sys.stderr,
        )
    except OSError as e:
        click.echo(
            f"Error: Fail to open config file: {config_path} ({e})", err=True
        )
        sys.exit(1)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Match the input decoding so passthrough bytes and names survive
    sys.stdout.reconfigure(errors="surrogateescape")

    if dumpconf:
        if dump_format == "json":
            click.echo(format_json(config))
        else:
            click.echo(format_text(config))
        return

    stderr = sys.stderr
    # Progress goes wherever the transformed output is not
    progress = sys.stdout if output else stderr

    with ExitStack() as stack:
        try:
            # newline="" keeps CRLF input byte-identical on passthrough
            infile = stack.enter_context(
                open(
                    tracefile,
                    encoding="utf-8",
                    errors="surrogateescape",
                    newline="",
                )
            )
        except OSError as e:
            click.echo(
                f"Error: Fail to open LCOV's info file: {tracefile} ({e})",
                err=True,
            )
            sys.exit(1)

        if output:
            try:
                outfile = stack.enter_context(
                    open(
                        output,
                        "w",
                        encoding="utf-8",
                        errors="surrogateescape",
                        newline="",
                    )
                )
            except OSError as e:
                click.echo(
                    f"Error: Fail to open output file: {output} ({e})",
                    err=True,
                )
                sys.exit(1)
        else:
            outfile = sys.stdout

        try:
            stats = strip_tracefile(
                infile,
                config,
                outfile,
                diagnostics=stderr,
                progress=progress,
                print_uncovered=print_uncovered,
                quiet=quiet,
            )
        except TracefileFormatError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    if not quiet:
        stderr.write(
            f"done: {stats.records_stripped} of {stats.records} records, "
            f"{stats.functions_stripped} functions, "
            f"{stats.branches_stripped} branches, "
            f"{stats.lines_stripped} lines stripped\n"
        )


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
