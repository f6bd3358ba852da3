import unittest
import os
import json
import tempfile

from techjobs.config.settings import StoreConfig, load_config, DATA_FILE
from techjobs.utils.errors import ConfigurationError
from tests.utils import write_temp_file, cleanup_temp_files


class TestStoreConfig(unittest.TestCase):
    
    def test_defaults(self):
        config = StoreConfig()
        self.assertEqual(config.data_file, DATA_FILE)
        self.assertEqual(config.get_csv_setting('delimiter'), ',')
        self.assertEqual(config.get_csv_setting('quotechar'), '"')
        self.assertEqual(config.get_csv_setting('encoding'), 'utf-8')
        self.assertIsNone(config.get_csv_setting('missing'))
    
    def test_partial_csv_settings_merge_over_defaults(self):
        config = StoreConfig(csv_settings={'delimiter': ';'})
        self.assertEqual(config.get_csv_setting('delimiter'), ';')
        self.assertEqual(config.get_csv_setting('quotechar'), '"')
    
    def test_invalid_delimiter(self):
        with self.assertRaises(ConfigurationError):
            StoreConfig(csv_settings={'delimiter': ''})
        with self.assertRaises(ConfigurationError):
            StoreConfig(csv_settings={'quotechar': '""'})
        with self.assertRaises(ConfigurationError):
            StoreConfig(csv_settings={'encoding': ''})
    
    def test_unknown_encoding(self):
        with self.assertRaises(ConfigurationError) as ctx:
            StoreConfig(csv_settings={'encoding': 'utf-99'})
        self.assertEqual(ctx.exception.details["key"], "encoding")
    
    def test_wrong_setting_types(self):
        with self.assertRaises(ConfigurationError):
            StoreConfig(csv_settings="tab")
        with self.assertRaises(ConfigurationError):
            StoreConfig(csv_settings=[",", "\""])
        with self.assertRaises(ConfigurationError):
            StoreConfig(data_file=42)
    
    def test_save_and_load(self):
        fd, path = tempfile.mkstemp(suffix='.json')
        os.close(fd)
        try:
            original = StoreConfig(data_file='data/jobs.csv', csv_settings={'delimiter': '\t'})
            self.assertTrue(original.save(path))
            
            loaded = StoreConfig.load(path)
            self.assertEqual(loaded.to_dict(), original.to_dict())
        finally:
            cleanup_temp_files(path)
    
    def test_load_invalid_json_falls_back_to_defaults(self):
        path = write_temp_file("{not json", suffix='.json')
        try:
            config = StoreConfig.load(path)
        finally:
            cleanup_temp_files(path)
        self.assertEqual(config.to_dict(), StoreConfig().to_dict())
    
    def test_load_non_object_falls_back_to_defaults(self):
        path = write_temp_file(json.dumps(["jobs.csv"]), suffix='.json')
        try:
            config = StoreConfig.load(path)
        finally:
            cleanup_temp_files(path)
        self.assertEqual(config.data_file, DATA_FILE)


    def test_load_wrong_setting_types(self):
        for data in ({"csv_settings": "tab"},
                     {"csv_settings": [["delimiter", ";"]]},
                     {"data_file": ["jobs.csv"]},
                     {"csv_settings": {"encoding": "utf-99"}}):
            path = write_temp_file(json.dumps(data), suffix='.json')
            try:
                with self.assertRaises(ConfigurationError):
                    StoreConfig.load(path)
            finally:
                cleanup_temp_files(path)


class TestLoadConfig(unittest.TestCase):
    
    def setUp(self):
        self.original_cwd = os.getcwd()
        self.temp_dir = tempfile.TemporaryDirectory()
        os.chdir(self.temp_dir.name)
    
    def tearDown(self):
        os.chdir(self.original_cwd)
        self.temp_dir.cleanup()
    
    def test_defaults_when_no_file(self):
        self.assertEqual(load_config().data_file, DATA_FILE)
    
    def test_explicit_path(self):
        path = os.path.join(self.temp_dir.name, 'custom.json')
        with open(path, 'w') as f:
            json.dump({'data_file': 'custom.csv'}, f)
        self.assertEqual(load_config(path).data_file, 'custom.csv')
    
    def test_working_directory_file(self):
        with open('techjobs.config.json', 'w') as f:
            json.dump({'data_file': 'found.csv'}, f)
        self.assertEqual(load_config().data_file, 'found.csv')
    
    def test_missing_explicit_path_searches_defaults(self):
        with open('config.json', 'w') as f:
            json.dump({'data_file': 'fallback.csv'}, f)
        self.assertEqual(load_config('does_not_exist.json').data_file, 'fallback.csv')


if __name__ == '__main__':
    unittest.main()
