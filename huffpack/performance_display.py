import matplotlib.pyplot as plt
import numpy as np

class PerformanceDisplay:
    def __init__(self, logs,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.7,
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=3):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        window = min(window, len(data))
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _plot_graph(self, labels, y_values, title, xlabel, ylabel, show_graph=False, save_path=None):
        if not y_values:
            print(f"No data available for {title}.")
            return False

        x = np.arange(len(y_values))
        y = np.array(y_values, dtype=np.float64)
        trend = self._moving_average(y)

        fig = plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.bar(x, y, alpha=self.bar_alpha, color=self.bar_color, label="Symbols")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")
        plt.xticks(x, labels, fontsize=self.font_size - 2)

        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close(fig)
        return True

    def _collect(self, attribute):
        entries = [log for log in self.logs if hasattr(log, 'symbol') and hasattr(log, attribute)]
        entries.sort(key=lambda log: getattr(log, attribute), reverse=True)
        return [str(log.symbol) for log in entries], [getattr(log, attribute) for log in entries]

    def generate_symbol_frequency_plot(self, show_graphs=False, save_path=None):
        labels, values = self._collect('frequency')
        return self._plot_graph(labels, values, "Symbol Frequency", "Symbol", "Occurrences", show_graphs, save_path)

    def generate_code_length_plot(self, show_graphs=False, save_path=None):
        labels, values = self._collect('code_length')
        return self._plot_graph(labels, values, "Code Length per Symbol", "Symbol", "Bits", show_graphs, save_path)
