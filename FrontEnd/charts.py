"""matplotlib figures for the month bar chart and the current-month pie.

Builders draw into a Figure they are handed (the canvas figure in the window,
a bare ``Figure`` in tests) and return the axes they created.
"""

from FrontEnd.styles.design_tokens import GITHUB_BLUES, theme


def _style_axes(figure, ax, colors):
	figure.patch.set_facecolor(colors['surface'])
	ax.set_facecolor(colors['surface'])
	ax.tick_params(axis='both', colors=colors['text_muted'], labelsize=9)
	for spine in ['top', 'right']:
		ax.spines[spine].set_visible(False)
	for spine in ['bottom', 'left']:
		ax.spines[spine].set_color(colors['border'])


def draw_daily_chart(figure, days, work_types, dark=True):
	"""Stacked bar per day, one series per work type in catalog order."""
	colors = theme(dark)
	figure.clear()
	ax = figure.add_subplot(111)
	_style_axes(figure, ax, colors)

	x = [d.label for d in days]
	bottom = [0.0] * len(days)
	for i, work_type in enumerate(work_types):
		y = [d.hours.get(work_type, 0.0) for d in days]
		ax.bar(
			x, y, bottom=bottom, label=work_type,
			color=GITHUB_BLUES[i % len(GITHUB_BLUES)],
			alpha=colors['bar_opacity'],
		)
		bottom = [b + v for b, v in zip(bottom, y)]

	ax.set_ylabel("Hours", color=colors['text_muted'])
	ax.set_ylim(bottom=0)
	ax.tick_params(axis='x', rotation=45)
	ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=colors['border'])
	ax.set_axisbelow(True)
	if work_types:
		ax.legend(frameon=False, labelcolor=colors['text'], fontsize=9)
	figure.tight_layout()
	return ax


def draw_breakdown_pie(figure, breakdown, dark=True):
	"""Pie of (work type, hours) pairs; empty breakdowns draw an empty frame."""
	colors = theme(dark)
	figure.clear()
	ax = figure.add_subplot(111)
	figure.patch.set_facecolor(colors['surface'])
	ax.set_facecolor(colors['surface'])
	ax.axis('equal')
	if not breakdown:
		ax.set_axis_off()
		return ax
	labels = [name for name, _ in breakdown]
	values = [hours for _, hours in breakdown]
	ax.pie(
		values,
		labels=labels,
		colors=[GITHUB_BLUES[i % len(GITHUB_BLUES)] for i in range(len(values))],
		autopct='%1.0f%%',
		startangle=90,
		textprops={'color': colors['text'], 'fontsize': 9},
	)
	return ax
