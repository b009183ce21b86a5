"""Holder for HolderSingleton. Importing this module builds the instance."""

from singleton_idioms.singletons.holder import HolderSingleton

INSTANCE = HolderSingleton._create()
