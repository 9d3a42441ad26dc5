# Standard Library
import os
import sys


#============================================
def repo_root():
	root = _find_repo_root(os.path.dirname(os.path.abspath(__file__)))
	if not root:
		raise RuntimeError("repo root could not be resolved from the tests directory")
	return root


#============================================
def _find_repo_root(start_dir):
	current = os.path.abspath(start_dir)
	while True:
		if _looks_like_repo_root(current):
			return current
		parent = os.path.dirname(current)
		if parent == current:
			return ""
		current = parent


#============================================
def _looks_like_repo_root(path):
	if not os.path.isdir(path):
		return False
	if not os.path.isfile(os.path.join(path, "pyproject.toml")):
		return False
	if not os.path.isdir(os.path.join(path, "packages", "chairflip")):
		return False
	return True


#============================================
def add_repo_root_to_sys_path():
	root = repo_root()
	if root not in sys.path:
		sys.path.insert(0, root)
	return root


#============================================
def add_chairflip_to_sys_path():
	root = add_repo_root_to_sys_path()
	chairflip_dir = os.path.join(root, "packages", "chairflip")
	if chairflip_dir not in sys.path:
		sys.path.insert(0, chairflip_dir)
	return root


#============================================
def add_tools_to_sys_path():
	root = add_chairflip_to_sys_path()
	tools_dir = os.path.join(root, "tools")
	if tools_dir not in sys.path:
		sys.path.insert(0, tools_dir)
	return root
