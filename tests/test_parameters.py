import pytest

from mapurl.core.config import settings
from mapurl.services.static_map.parameters import scene_from_parameters
from mapurl.services.static_map.url_builder import STYLE_DEFAULT, build_map_image_url


def element_parameters():
    return {
        "latitude": 45.4642,
        "longitude": 9.19,
        "zoom": 13,
        "mapType": "satellite",
        "imageType": "png",
        "mapScale": "2",
        "reqParams": "key=secret",
        "markers": {
            "stores": {
                "markers": [
                    {
                        "latitude": 45.47,
                        "longitude": 9.2,
                        "label": "store",
                        "icon": "legacy.png",
                        "icon.url": "http://icons/store.png",
                        "icon.anchor.x": -1,
                        "icon.anchor.y": 1,
                    },
                    {},
                    None,
                ]
            },
            "settings": {"color": "blue"},
            "warehouses": {
                "markers": [
                    {"latitude": 45.5, "longitude": 9.3, "color": "00ff00", "size": "tiny"},
                ]
            },
        },
        "paths": [
            {
                "strokeColor": "#FF0000",
                "strokeOpacity": "0.5",
                "strokeWeight": "3",
                "isPolygon": "true",
                "fillColor": "yellow",
                "fillOpacity": "",
                "locations": [
                    {"latitude": 45.46, "longitude": 9.18},
                    {"latitude": 45.47, "longitude": 9.19},
                    {"latitude": 45.46, "longitude": 9.2},
                ],
            },
            {},
            None,
        ],
    }


def test_scene_from_parameters():
    scene = scene_from_parameters(element_parameters(), 640, 480)

    assert scene.center.lat == 45.4642
    assert scene.zoom == 13
    assert (scene.width, scene.height) == (640, 480)
    assert scene.map_type == "satellite"
    assert scene.image_format == "png"
    assert scene.scale == "2"
    assert scene.request_params == "key=secret"

    assert len(scene.markers) == 2
    store = scene.markers[0].markers[0]
    assert len(scene.markers[0].markers) == 1
    assert store.icon_url == "http://icons/store.png"
    assert (store.anchor_x, store.anchor_y) == (-1, 1)

    assert len(scene.paths) == 1
    path = scene.paths[0]
    assert path.is_polygon is True
    assert path.stroke_opacity == 0.5
    assert path.stroke_weight == 3
    assert path.fill_opacity is None
    assert len(path.vertices) == 3


def test_url_from_parameters(monkeypatch):
    monkeypatch.setattr(settings, "STATIC_MAP_BASE_URL", "https://maps.example/staticmap?")
    url = build_map_image_url(scene_from_parameters(element_parameters(), 640, 480))
    assert url == (
        "https://maps.example/staticmap?center=45.4642,9.19&zoom=13&size=640x480"
        "&maptype=satellite&format=png&scale=2" + STYLE_DEFAULT +
        "&markers=anchor:topleft%7Clabel:S%7Cicon:http://icons/store.png%7C45.47,9.2"
        "&markers=size:tiny%7Ccolor:0x00ff00%7C45.5,9.3"
        "&path=color:0xff00007f%7Cfillcolor:0xffff0000%7Cweight:3%7C"
        "45.46,9.18%7C45.47,9.19%7C45.46,9.2%7C45.46,9.18"
        "&key=secret"
    )


def test_missing_parameters_use_defaults():
    scene = scene_from_parameters({}, 100, 100)
    assert scene.center is None
    assert scene.zoom is None
    assert scene.markers == []
    assert scene.paths == []


def test_malformed_stroke_weight_fails_fast():
    parameters = {"paths": [{"strokeWeight": "thick", "locations": []}]}
    with pytest.raises(ValueError):
        scene_from_parameters(parameters, 100, 100)


def test_malformed_opacity_fails_fast():
    parameters = {"paths": [{"strokeColor": "red", "strokeOpacity": "opaque"}]}
    with pytest.raises(ValueError):
        scene_from_parameters(parameters, 100, 100)


def test_polygon_flag_follows_boolean_parsing():
    parameters = {"paths": [{"isPolygon": "False"}, {"isPolygon": "maybe"}, {"isPolygon": True}]}
    scene = scene_from_parameters(parameters, 100, 100)
    assert [p.is_polygon for p in scene.paths] == [False, False, True]
