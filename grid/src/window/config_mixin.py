"""Configuration management for GridDemoWindow"""

import os
import json
from utils.logger import loggerRaise
from constants import DEFAULT_RECORD_COUNT, DEFAULT_CONSTRAIN_DRAG, DEFAULT_WINDOW_SIZE, MIN_WINDOW_SIZE


def default_config():
	"""Config values used when the file or a key is missing"""
	return {
		'record_count': DEFAULT_RECORD_COUNT,
		'constrain_drag': DEFAULT_CONSTRAIN_DRAG,
		'window_size': list(DEFAULT_WINDOW_SIZE),
	}


def normalize_config(raw):
	"""Merge a loaded config dict over the defaults, dropping bad values"""
	config = default_config()
	if not isinstance(raw, dict):
		return config

	record_count = raw.get('record_count')
	if isinstance(record_count, int) and not isinstance(record_count, bool) and record_count >= 0:
		config['record_count'] = record_count

	constrain_drag = raw.get('constrain_drag')
	if isinstance(constrain_drag, bool):
		config['constrain_drag'] = constrain_drag

	window_size = raw.get('window_size')
	if (isinstance(window_size, (list, tuple)) and len(window_size) == 2
			and all(isinstance(v, int) for v in window_size)):
		config['window_size'] = [max(window_size[0], MIN_WINDOW_SIZE[0]), max(window_size[1], MIN_WINDOW_SIZE[1])]

	return config


class ConfigMixin:
	"""Config file load/save for the demo window"""

	def _load_config(self):
		"""Load settings from the config file (defaults if missing)"""
		self.config = default_config()
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					self.config = normalize_config(json.load(f))
		except Exception as e:
			loggerRaise(e, "Error loading config")

	def _save_config(self):
		"""Write current settings to the config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)

			self.config['constrain_drag'] = self.table.is_constrained()
			self.config['window_size'] = [self.width(), self.height()]

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(self.config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
