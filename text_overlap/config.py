import logging
from pathlib import Path

from hydra import compose, initialize
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Loads the packaged Hydra config (configs/config.yaml) and lets callers
    reload it with overrides.

    Usage:
        config = ConfigManager()
        cfg = config.load(verbose=True)
        # ... later ...
        cfg = config.reload(["similarity.shingle_length=5"])
        config.similarity.threshold
    """
    def __init__(self, config_name="config", config_path="./configs", overrides=None, version_base="1.3"):
        self.config_name = config_name
        self.config_path = config_path
        self.overrides = list(overrides or [])
        self.version_base = version_base
        self._cfg = None

    def load(self, overrides=None, verbose=False) -> DictConfig:
        """Compose the config, applying overrides (or the defaults given at construction)"""
        overrides = list(overrides) if overrides else self.overrides
        if GlobalHydra.instance().is_initialized():
            # Inside a caller's Hydra app; leave its global state alone
            self._cfg = self._load_yaml(overrides)
        else:
            with initialize(version_base=self.version_base, config_path=self.config_path):
                self._cfg = compose(config_name=self.config_name, overrides=overrides)
        logger.debug(f"Loaded config '{self.config_name}' with overrides {overrides}")
        if verbose:
            print(OmegaConf.to_yaml(self._cfg))
        return self._cfg

    def _load_yaml(self, overrides: list[str]) -> DictConfig:
        """Read the packaged YAML with OmegaConf and apply dotlist overrides"""
        path = Path(__file__).parent / self.config_path / f"{self.config_name}.yaml"
        base = OmegaConf.load(path)
        OmegaConf.set_struct(base, True)
        return OmegaConf.merge(base, OmegaConf.from_dotlist(overrides))

    def reload(self, overrides=None, verbose=False) -> DictConfig:
        """Reload configuration using Hydra"""
        return self.load(overrides=overrides, verbose=verbose)

    @property
    def cfg(self) -> DictConfig:
        """Get the current config object (load if not loaded)"""
        if self._cfg is None:
            return self.load()
        return self._cfg

    @property
    def similarity(self) -> DictConfig:
        """Shortcut to the similarity section"""
        return self.cfg.similarity

    def to_dict(self) -> dict:
        """Resolved config as plain Python containers"""
        return OmegaConf.to_container(self.cfg, resolve=True)
