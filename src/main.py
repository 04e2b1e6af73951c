import os

import click

import eval.benchmark
import eval.plot_benchmark
import scenarios.hello_world
import scenarios.shortest_path
from utilities.get_out_path import get_out_path


@click.group()
def main():
    pass


@click.command(name='demo', help="Enqueue a few sample entries and drain the queue in priority order.")
def demo():
    scenarios.hello_world.run_scenario()


@click.command(name='benchmark',
               help="Time insert, extract, peek and decrease-key for growing queue sizes and save the averages as CSV.")
@click.option("--sizes", "-n", type=click.IntRange(min=1), multiple=True,
              help="Queue size to benchmark. Can be given multiple times.")
@click.option("--iterations", type=click.IntRange(min=1), default=eval.benchmark.DEFAULT_ITERATIONS,
              show_default=True)
@click.option("--seed", type=int, default=None, help="Seed for the random workloads.")
@click.option("--output", type=click.Path(dir_okay=False), default=None,
              help="CSV file to write. Defaults to benchmark_results.csv in $PQ_OUT_DIR (or ./out).")
@click.option("--plot", is_flag=True, help="Also save a plot of the results next to the CSV file.")
def benchmark(sizes, iterations: int, seed, output, plot: bool):
    if not sizes:
        sizes = eval.benchmark.DEFAULT_SIZES
    if output is None:
        output = os.path.join(get_out_path(), "benchmark_results.csv")
    eval.benchmark.benchmark_to_csv(output, sizes, iterations, seed)
    if plot:
        png_path = eval.plot_benchmark.plot_benchmark(output)
        print(f"Plot saved to {png_path}")


@click.command(name='shortest-path', help="Run Dijkstra's algorithm on the sample graph.")
@click.option("--source", type=int, default=0, show_default=True)
def shortest_path(source: int):
    try:
        scenarios.shortest_path.run_scenario(source)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--source")


main.add_command(demo)
main.add_command(benchmark)
main.add_command(shortest_path)

if __name__ == '__main__':
    main()
