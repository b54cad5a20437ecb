"""Tests for scene state, camera and interaction state."""
from lintrans.matrices import identity_matrix
from lintrans.scene import Camera, InteractionState, Scene2D, Scene3D
from lintrans.vectors import Vector2D, Vector3D


class TestScene2D:

    def test_defaults(self):
        scene = Scene2D()
        assert scene.vectors == [Vector2D(3, 2), Vector2D(-2, 3)]
        assert scene.transformation == identity_matrix()
        assert scene.show_grid and scene.show_basis_vectors
        assert not scene.show_eigenvectors
        assert scene.animation_progress == 1

    def test_lifecycle(self):
        scene = Scene2D(vectors=[Vector2D(1, 0), Vector2D(0, 1), Vector2D(2, 2)])
        scene.add_vector()
        assert scene.vectors[-1] == Vector2D(1, 1)

        scene.update_vector(0, Vector2D(5, 5))
        assert scene.vectors[0] == Vector2D(5, 5)

        scene.remove_vector(1)
        assert scene.vectors == [Vector2D(5, 5), Vector2D(2, 2), Vector2D(1, 1)]

    def test_vectors_are_copied_in(self):
        source = [Vector2D(1, 1)]
        scene = Scene2D(vectors=source)
        scene.add_vector()
        assert len(source) == 1


class TestScene3D:

    def test_defaults(self):
        scene = Scene3D()
        assert len(scene.vectors) == len(scene.scales) == 2
        assert not scene.show_vector_sum

    def test_scale_of_treats_missing_and_zero_as_one(self):
        scene = Scene3D(vectors=[Vector3D(1, 0, 0)] * 3, scales=[2.0, 0.0])
        assert scene.scale_of(0) == 2.0
        assert scene.scale_of(1) == 1.0
        assert scene.scale_of(2) == 1.0

    def test_remove_keeps_scales_parallel(self):
        scene = Scene3D(vectors=[Vector3D(1, 0, 0), Vector3D(0, 1, 0), Vector3D(0, 0, 1)],
                        scales=[1.0, 2.0, 3.0])
        scene.remove_vector(1)
        assert scene.vectors == [Vector3D(1, 0, 0), Vector3D(0, 0, 1)]
        assert scene.scales == [1.0, 3.0]

    def test_add_and_scale(self):
        scene = Scene3D(vectors=[], scales=[])
        scene.add_vector()
        scene.set_scale(0, 1.5)
        assert scene.vectors == [Vector3D(1, 1, 1)]
        assert scene.scale_of(0) == 1.5


class TestInteractionState:

    def test_release_keeps_hover(self):
        state = InteractionState()
        state.dragging_index = 1
        state.hovered_index = 1
        state.dragging_view = True
        state.release()
        assert state.dragging_index is None
        assert not state.dragging_view
        assert state.hovered_index == 1

    def test_leave_clears_everything(self):
        state = InteractionState()
        state.dragging_index = 0
        state.hovered_index = 2
        state.leave()
        assert state.dragging_index is None
        assert state.hovered_index is None


def test_camera_initial_angles():
    cam = Camera()
    assert (cam.rotation_x, cam.rotation_y) == (0.4, 0.6)
